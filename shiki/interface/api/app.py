"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shiki.config import Settings
from shiki.interface.api.routes import (
    admin,
    articles,
    categories,
    comments,
    health,
    home,
    likes,
    members,
)
from shiki.interface.error import register_error_handlers
from shiki.util.di.container import create_container, setup_di
from shiki.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one
    """
    settings = Settings()
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Finalizes APP-scoped resources such as the database engine
        await container.close()

    # Instrument httpx for outbound HTTP requests (visitor lookup)
    instrument_httpx()

    app_instance = FastAPI(
        title="Shiki API",
        description="Backend API for Shiki - a blog with threaded reader comments",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(home.router)
    app_instance.include_router(articles.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(members.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(admin.router)

    return app_instance
