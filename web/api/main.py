"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.container import Container, container
from app.repositories.db import close_db
from web.api.analytics import router as analytics_router
from web.api.errors import register_error_handlers


def create_app(app_container: Container | None = None) -> FastAPI:
    """Build the API app around a DI container (the global one by default)."""
    app_container = app_container or container

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        app_container.init()
        yield
        close_db()

    app = FastAPI(title="Asset Analytics", lifespan=lifespan)
    app.state.container = app_container
    register_error_handlers(app)
    app.include_router(analytics_router)
    return app


app = create_app()
