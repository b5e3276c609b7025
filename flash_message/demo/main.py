"""Demo entrypoint and composition."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from flash_message.config import FlashSettings, get_settings
from flash_message.demo import routes
from flash_message.logging import configure_logging
from flash_message.plugin import FlashMessages

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

configure_logging()


def create_app(settings: FlashSettings | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    settings:
        - None: load settings from the environment.
        - FlashSettings: use the given settings (tests).
    """
    if settings is None:
        # Clear cached settings to ensure fresh config on app creation (tests with monkeypatch)
        get_settings.cache_clear()
        settings = get_settings()

    # Built before the app so invalid settings never leave a half-configured app
    flash = FlashMessages(settings)

    app = FastAPI(title="Flash messages demo")
    flash.install(app)
    app.state.templates = flash.templates(directory=str(TEMPLATES_DIR))

    app.include_router(routes.router)

    return app
