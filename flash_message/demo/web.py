"""Template rendering helper."""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse


def render(
    request: Request, name: str, context: dict[str, Any] | None = None, status_code: int = 200
) -> HTMLResponse:
    """Render a template; the flash token is injected by the templates' hook."""
    templates = request.app.state.templates
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)
