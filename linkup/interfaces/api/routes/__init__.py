from fastapi import FastAPI

from .auth import router as auth_router
from .comments import router as comments_router
from .friend_requests import router as friend_requests_router
from .likes import router as likes_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .realtime import router as realtime_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(posts_router)
    app.include_router(comments_router)
    app.include_router(likes_router)
    app.include_router(friend_requests_router)
    app.include_router(messages_router)
    app.include_router(notifications_router)
    app.include_router(realtime_router)

    @app.get("/", include_in_schema=False)
    def health() -> str:
        return "API is running"
