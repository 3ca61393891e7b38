from fastapi import FastAPI

from .auth import router as auth_router
from .brd_requests import router as brd_requests_router
from .notifications import router as notifications_router
from .system_settings import router as system_settings_router
from .templates import router as templates_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(brd_requests_router)
    app.include_router(templates_router)
    app.include_router(notifications_router)
    app.include_router(system_settings_router)
