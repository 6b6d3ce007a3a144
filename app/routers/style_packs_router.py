"""Style packs API: catalogue, purchased packs, purchase."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.auth.current_user import CurrentUser, get_current_user
from app.db import get_db
from app.schemas.style_pack import StylePackRead, UserStylePackRead
from app.services.style_pack_service import (
    StylePackAlreadyOwnedError,
    StylePackService,
)

router = APIRouter(
    prefix="/style-packs",
    tags=["style-packs"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=dict)
def list_style_packs(
    _current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """List active style packs."""
    packs = StylePackService(db).get_active_style_packs()
    return {"items": [StylePackRead.model_validate(p) for p in packs]}


@router.get("/purchased", response_model=dict)
def list_purchased_style_packs(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> dict:
    """List the caller's purchased style packs."""
    links = StylePackService(db).get_purchased_style_packs(current_user.id)
    return {"items": [UserStylePackRead.model_validate(link) for link in links]}


@router.post(
    "/{style_pack_id}/purchase",
    response_model=UserStylePackRead,
    status_code=201,
)
def purchase_style_pack(
    style_pack_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserStylePackRead:
    """Record a purchase. Points are not deducted here."""
    svc = StylePackService(db)
    if svc.get_active_style_pack(style_pack_id) is None:
        raise HTTPException(status_code=404, detail="Style pack not found")
    try:
        link = svc.purchase(current_user.id, style_pack_id)
    except StylePackAlreadyOwnedError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return UserStylePackRead.model_validate(link)
