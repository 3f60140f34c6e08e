"""
FastAPI application for the todo list API
Run locally with: python dev.py
"""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone
from api.config import Settings, settings as default_settings
from api.errors import register_exception_handlers
from api.routers import todos
from api.services.todos import TodoStore
import logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API with its own todo store.

    Every call returns an independent application; the store lives on
    ``app.state.todo_store`` for the lifetime of that app.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description="In-memory todo list API",
        version=settings.app_version,
        debug=settings.debug
    )

    app.state.settings = settings
    app.state.todo_store = TodoStore.seeded() if settings.seed_todos else TodoStore()
    logger.info(f"Todo store ready with {len(app.state.todo_store)} todos")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(todos.router)

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "message": f"{settings.app_name} is running",
            "version": settings.app_version
        }

    @app.get("/api/health")
    async def health_check():
        """Detailed health check"""
        return {
            "status": "healthy",
            "service": "todo-api",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "todos": len(app.state.todo_store)
        }

    return app


app = create_app()
