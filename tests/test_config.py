from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI

from flash_message.config import FlashSettings, get_settings, load_settings
from flash_message.engine import FlashEngine
from flash_message.errors import IncompatibleDequeueError, InvalidConfigurationError
from flash_message.plugin import FlashMessages
from flash_message.styles import ArgumentStyle, DequeueStyle, QueueStyle


def test_defaults() -> None:
    settings = FlashSettings()
    assert settings.token_name == "flash"
    assert settings.session_hash_key == "_flash"
    assert settings.queue is QueueStyle.KEY_SINGLE
    assert settings.arguments is ArgumentStyle.JOIN
    assert settings.dequeue is DequeueStyle.BY_KEY
    assert settings.join_separator == ""


@pytest.mark.parametrize(
    "overrides",
    [
        {"arguments": "concat"},
        {"queue": "stack"},
        {"dequeue": "sometimes"},
        {"token_name": ""},
    ],
)
def test_unknown_values_are_rejected(overrides: dict[str, str]) -> None:
    with pytest.raises(InvalidConfigurationError):
        load_settings(**overrides)


@pytest.mark.parametrize("queue", ["single", "multiple"])
def test_by_key_needs_keyed_queue(queue: str) -> None:
    with pytest.raises(IncompatibleDequeueError):
        load_settings(queue=queue, dequeue="by_key")


def test_engine_checks_settings_built_directly() -> None:
    settings = FlashSettings(queue="single")
    with pytest.raises(IncompatibleDequeueError):
        FlashEngine(settings)


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("FLASH_QUEUE", "key_multiple")
    monkeypatch.setenv("FLASH_ARGUMENTS", "array")
    monkeypatch.setenv("FLASH_TOKEN_NAME", "notices")
    get_settings.cache_clear()
    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.queue is QueueStyle.KEY_MULTIPLE
    assert settings.arguments is ArgumentStyle.ARRAY
    assert settings.token_name == "notices"


def test_invalid_environment_fails_loading(monkeypatch) -> None:
    monkeypatch.setenv("FLASH_DEQUEUE", "by_key")
    monkeypatch.setenv("FLASH_QUEUE", "multiple")
    get_settings.cache_clear()
    try:
        with pytest.raises(IncompatibleDequeueError):
            get_settings()
    finally:
        get_settings.cache_clear()


def test_settings_are_immutable() -> None:
    settings = FlashSettings()
    with pytest.raises(ValueError):
        settings.queue = QueueStyle.SINGLE  # type: ignore[misc]


def test_plugin_not_registered_on_bad_settings() -> None:
    app = FastAPI()
    with pytest.raises(InvalidConfigurationError):
        FlashMessages(FlashSettings(queue="multiple")).install(app)
    assert not hasattr(app.state, "flash_messages")
    assert app.user_middleware == []


def test_plugin_registers_session_middleware() -> None:
    app = FastAPI()
    plugin = FlashMessages(FlashSettings())
    plugin.install(app)

    assert app.state.flash_messages is plugin
    assert len(app.user_middleware) == 1


@pytest.mark.parametrize(
    "mapping",
    [
        {"queue": "stack"},
        {"arguments": "concat"},
        {"dequeue": "sometimes"},
        {"queue": "single", "dequeue": "by_key"},
    ],
)
def test_plugin_rejects_bad_mapping(mapping: dict[str, str]) -> None:
    with pytest.raises(InvalidConfigurationError):
        FlashMessages(mapping)


def test_plugin_accepts_mapping() -> None:
    plugin = FlashMessages({"queue": "key_multiple", "dequeue": "when_used", "token_name": "notes"})

    assert plugin.settings.queue is QueueStyle.KEY_MULTIPLE
    assert plugin.settings.dequeue is DequeueStyle.WHEN_USED
    assert plugin.engine.token_name == "notes"


def test_engine_logs_selected_policies(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="flash_message.engine"):
        FlashEngine(load_settings(queue="multiple", dequeue="when_used"))

    assert "queue=multiple" in caplog.text
    assert "dequeue=when_used" in caplog.text
