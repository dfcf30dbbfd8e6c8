"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paracosm.config import Settings
from paracosm.interface.api.routes import comments, health, votes
from paracosm.util.di.container import create_container, setup_di
from paracosm.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Paracosm API",
        description="Discussion threads and voting for Paracosm worlds",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)

    return app_instance


# App instance for uvicorn; start_app.py configures Logfire before import
app = create_app()
