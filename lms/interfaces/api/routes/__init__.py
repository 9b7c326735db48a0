from fastapi import FastAPI

from .announcements import router as announcements_router
from .assignments import router as assignments_router
from .auth import router as auth_router
from .conversations import router as conversations_router
from .courses import router as courses_router
from .notifications import router as notifications_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(courses_router)
    app.include_router(assignments_router)
    app.include_router(announcements_router)
    app.include_router(conversations_router)
    app.include_router(notifications_router)
