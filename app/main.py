"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi_pagination import add_pagination

from app.config import get_settings
from app.exceptions import ChatAPIError
from app.infra.logging_config import LoggingConfig, get_logger
from app.routers import (
    chat_router,
    conversations_router,
    profile_router,
    rewards_router,
    style_packs_router,
    system,
)

logger = get_logger("main")


def _error_body(error: str, details: str) -> dict[str, str]:
    return {"error": error, "details": details}


def _validation_details(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into "field: message" pairs."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ChatAPIError)
    async def chat_api_error_handler(request: Request, exc: ChatAPIError) -> JSONResponse:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.details)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body("Invalid request", _validation_details(exc)),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal server error", str(exc)),
        )


def create_app(testing: bool = False) -> FastAPI:
    settings = get_settings()
    LoggingConfig()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        description="Chat API with conversation history and a points/streak reward ledger",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or ["*"],
        allow_methods=["*"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    register_exception_handlers(app)

    app.include_router(chat_router.router)
    app.include_router(conversations_router.router)
    app.include_router(profile_router.router)
    app.include_router(rewards_router.router)
    app.include_router(style_packs_router.router)
    app.include_router(system.router)

    add_pagination(app)

    if not testing:
        logger.info("Starting %s (%s)", settings.app_name, settings.environment)

    return app


app = create_app()
