from typing import Optional

from pydantic import BaseModel


class AppGroup(BaseModel):
    name: str
    environment: str
    log_level: str
    port: int


class DatabaseGroup(BaseModel):
    database_host: Optional[str] = None
    database_driver: Optional[str] = None
    pool_size: int
    max_overflow: int


class CompletionGroup(BaseModel):
    model: str
    api_base: str
    api_key_set: bool
    timeout_seconds: float
    history_limit: int


class SystemSettingsGrouped(BaseModel):
    """Non-sensitive configuration, grouped for troubleshooting."""

    app: AppGroup
    database: DatabaseGroup
    completion: CompletionGroup
