"""Session middleware installation."""

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from flash_message.config import FlashSettings


def install_middlewares(app: FastAPI, settings: FlashSettings) -> None:
    """Install the cookie session the flash store lives in."""
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        max_age=settings.session_max_age,
    )
