# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/core/logger.py
import sys
from typing import Any, Optional

from loguru import logger

DEFAULT_LEVEL = "INFO"

_sink_id: Optional[int] = None


def _format(record: dict) -> str:
    color = record["extra"].get("color", "green")
    return (
        f"<{color}>{{time:YYYY-MM-DD HH:mm:ss.SSS}}</{color}> | "
        "<b>{level:<4}</b> | "
        "<magenta>{extra[prefix]}</magenta> | "
        "<cyan>{name}:{function}:{line}</cyan> | "
        "<b>{message}</b>\n{exception}"
    )


def setup_logging(level: str = DEFAULT_LEVEL, sink: Optional[Any] = None) -> None:
    """
    (Re)create the single process-wide Loguru sink.

    Only the entry point calls this with the configured level; modules just
    bind their prefix through `configure_logger`.

    Args:
        level: Minimum log level captured by the handler.
        sink: Where records go; defaults to the current ``sys.stderr``.
    """
    global _sink_id

    logger.remove()
    logger.configure(extra={"prefix": "-"})
    _sink_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=_format,
        colorize=True,
    )


def configure_logger(
    prefix: str = "APP",
    color: str = "green",
) -> logger.__class__:
    """
    Return a Loguru logger bound to a short module prefix.

    Adds a default sink on first use but never touches an existing one, so
    the level chosen by `setup_logging` stays in force.

    Args:
        prefix: Short label added to every message.
        color: Any Loguru-supported colour name for the timestamp.

    Returns:
        Bound `loguru.logger` instance.
    """
    if _sink_id is None:
        setup_logging()
    return logger.bind(prefix=prefix, color=color)
