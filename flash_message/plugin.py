"""FastAPI integration: request helpers, dependency and template hook."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from os import PathLike
from typing import Any

from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from flash_message.config import FlashSettings, get_settings, load_settings
from flash_message.engine import FlashEngine
from flash_message.middleware import install_middlewares

logger = logging.getLogger(__name__)

ContextProcessor = Callable[[Request], dict[str, Any]]


class Flasher:
    """Flash operations bound to one request."""

    def __init__(self, engine: FlashEngine, request: Request) -> None:
        self.engine = engine
        self.request = request

    def flash(self, *args: Any) -> Any:
        return self.engine.flash(self.request.session, *args)

    def flush(self, *keys: str) -> Any:
        return self.engine.flush(self.request.session, *keys)


class FlashMessages:
    """
    The plugin object.

    Build it once at startup; invalid settings raise before anything is
    registered on the application.
    """

    def __init__(self, settings: FlashSettings | Mapping[str, Any] | None = None) -> None:
        """
        settings:
            - None: load settings from the environment.
            - FlashSettings: use them as given.
            - Mapping: plain configuration values, validated like the environment.
        """
        if settings is None:
            settings = get_settings()
        elif not isinstance(settings, FlashSettings):
            settings = load_settings(**settings)
        self.settings = settings
        self.engine = FlashEngine(self.settings)

    def install(self, app: FastAPI, *, sessions: bool = True) -> None:
        """
        Attach the plugin to an application.

        sessions:
            - True: add Starlette's SessionMiddleware with the plugin settings.
            - False: the application already provides request.session.
        """
        if sessions:
            install_middlewares(app, self.settings)
        app.state.flash_messages = self
        logger.info("Flash messages installed on %s", app.title)

    def flash(self, request: Request, *args: Any) -> Any:
        """Store a flash value in the request session and return it."""
        return self.engine.flash(request.session, *args)

    def flash_flush(self, request: Request, *keys: str) -> Any:
        """Remove flash state from the request session and return it."""
        return self.engine.flush(request.session, *keys)

    def context_processor(self, request: Request) -> dict[str, Any]:
        """Template hook: one entry, named after the configured token."""
        context: dict[str, Any] = {}
        self.engine.materialize(request.session, context)
        return context

    def templates(
        self,
        directory: str | PathLike[str] | Sequence[str | PathLike[str]] | None = None,
        *,
        context_processors: list[ContextProcessor] | None = None,
        **kwargs: Any,
    ) -> Jinja2Templates:
        """Build Jinja2 templates with the flash hook registered."""
        processors = [*(context_processors or []), self.context_processor]
        return Jinja2Templates(directory=directory, context_processors=processors, **kwargs)


def get_flasher(request: Request) -> Flasher:
    """FastAPI dependency returning flash operations for the current request."""
    plugin: FlashMessages = request.app.state.flash_messages
    return Flasher(plugin.engine, request)
