import logging
import sys

from repolens.config import settings


def setup_logging(level: str | int | None = None) -> None:
    """Configure root logging for a host process embedding the engine."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from asyncio debug output
    logging.getLogger("asyncio").setLevel(logging.WARNING)
