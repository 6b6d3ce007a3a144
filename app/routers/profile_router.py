from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.auth.current_user import CurrentUser, get_current_user
from app.db import get_db
from app.schemas.profile import ProfileRead
from app.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileRead)
def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ProfileRead:
    """Return the caller's profile with points and streak."""
    profile = ProfileService(db).get_profile(current_user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileRead.model_validate(profile)
