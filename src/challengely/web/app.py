"""FastAPI application for the challengely web interface."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from .. import __version__
from ..config import Settings, get_settings
from ..engines.app import AppRoot, Tab
from .deps import get_app_root
from .routers import analytics, challenge, chat, onboarding, profile


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: build the app root. Shutdown: cancel timers."""
        app.state.app_root = await AppRoot.create(settings or get_settings())
        yield
        await app.state.app_root.close()

    app = FastAPI(
        title="challengely",
        description="Daily challenges, streaks, and a pocket assistant",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(onboarding.router)
    app.include_router(challenge.router)
    app.include_router(chat.router)
    app.include_router(profile.router)
    app.include_router(analytics.router)

    @app.get("/")
    async def root(app_root: AppRoot = Depends(get_app_root)):
        """App entry: onboarding gate and available tabs."""
        return {
            "is_onboarding_complete": app_root.is_onboarding_complete,
            "selected_tab": app_root.selected_tab.value,
            "tabs": [{"id": tab.value, "title": tab.title} for tab in Tab],
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
