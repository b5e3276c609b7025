"""Argument shaping: collapse the values of one flash() call into one value."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from flash_message.styles import ArgumentStyle

Shaper = Callable[[Sequence[Any]], Any]


def _single(values: Sequence[Any]) -> Any:
    return values[0] if values else None


def _auto(values: Sequence[Any]) -> Any:
    if len(values) > 1:
        return list(values)
    return _single(values)


def _array(values: Sequence[Any]) -> list[Any]:
    return list(values)


def make_shaper(style: ArgumentStyle, separator: str = "") -> Shaper:
    """Return the shaping function for an argument style."""
    if style is ArgumentStyle.SINGLE:
        return _single
    if style is ArgumentStyle.AUTO:
        return _auto
    if style is ArgumentStyle.ARRAY:
        return _array

    def _join(values: Sequence[Any]) -> str:
        return separator.join(str(v) for v in values)

    return _join
