from fastapi import APIRouter, Depends
from fastapi_pagination import Page, Params
from fastapi_pagination.ext.sqlalchemy import paginate
from sqlalchemy.orm import Session

from app.auth.current_user import CurrentUser, get_current_user
from app.db import get_db
from app.schemas.reward import RewardRead
from app.services.reward_service import RewardService

router = APIRouter(prefix="/rewards", tags=["rewards"])


@router.get("", response_model=Page[RewardRead])
def list_rewards(
    params: Params = Depends(),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Page[RewardRead]:
    """List the caller's reward ledger, newest first."""
    query = RewardService(db).get_rewards_query(current_user.id)
    return paginate(
        db,
        query,
        params=params,
        transformer=lambda items: [RewardRead.model_validate(r) for r in items],
    )
