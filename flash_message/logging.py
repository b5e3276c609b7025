"""Basic logging configuration."""

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging for applications using the plugin."""
    # Keep simple, Uvicorn config remains for access logs
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("flash_message").setLevel(level)
