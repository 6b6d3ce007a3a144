from fastapi import APIRouter, Depends

from app.auth.current_user import CurrentUser, get_current_user
from app.config import get_settings
from app.schemas.system import (
    AppGroup,
    CompletionGroup,
    DatabaseGroup,
    SystemSettingsGrouped,
)

router = APIRouter(
    prefix="/system",
    tags=["system"],
    responses={404: {"description": "Not found"}},
)


@router.get("/settings", response_model=SystemSettingsGrouped)
def get_system_settings(
    _current_user: CurrentUser = Depends(get_current_user),
) -> SystemSettingsGrouped:
    """Return grouped, non-sensitive system configuration settings for troubleshooting."""
    s = get_settings()

    app_group = AppGroup(
        name=s.app_name,
        environment=s.environment,
        log_level=s.log_level,
        port=s.port,
    )

    # Extract safe database info only (no credentials)
    database_host = None
    database_driver = None
    try:
        url_obj = s.database_url_obj
        database_host = url_obj.host
        database_driver = url_obj.get_backend_name()
    except ValueError:
        pass

    database_group = DatabaseGroup(
        database_host=database_host,
        database_driver=database_driver,
        pool_size=s.database_pool_size,
        max_overflow=s.database_max_overflow,
    )

    completion_group = CompletionGroup(
        model=s.gemini_model,
        api_base=s.gemini_api_base,
        api_key_set=bool(s.gemini_api_key),
        timeout_seconds=s.gemini_timeout_seconds,
        history_limit=s.history_limit,
    )

    return SystemSettingsGrouped(
        app=app_group,
        database=database_group,
        completion=completion_group,
    )


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
