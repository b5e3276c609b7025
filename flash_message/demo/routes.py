"""Demo routes: pages that display flash messages and endpoints that set them."""

from typing import Any

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, Response

from flash_message.demo.web import render
from flash_message.htmx import redirect
from flash_message.plugin import Flasher, get_flasher

router = APIRouter()


@router.get("/", response_class=HTMLResponse, tags=["web"])
def index(request: Request) -> HTMLResponse:
    """Render home page, reading every pending message."""
    return render(request, "index.html", {"title": "Flash messages demo"})


@router.get("/errors", response_class=HTMLResponse, tags=["web"])
def errors_only(request: Request) -> HTMLResponse:
    """Render a page that only reads the 'error' message."""
    return render(request, "errors_only.html", {"title": "Errors"})


@router.get("/demo/flash", tags=["demo"])
def demo_flash(
    request: Request,
    key: str = "success",
    msg: str = "Operation completed",
    flasher: Flasher = Depends(get_flasher),
) -> Response:
    """Add a message and redirect to home (HTMX-aware)."""
    flasher.flash(key, msg)
    return redirect(request, "/")


@router.get("/demo/flush", tags=["demo"])
def demo_flush(
    key: list[str] = Query(default=[]),
    flasher: Flasher = Depends(get_flasher),
) -> dict[str, Any]:
    """Drop pending messages, all of them or only the given keys."""
    return {"flushed": flasher.flush(*key)}
