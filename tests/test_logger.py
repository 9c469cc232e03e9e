import asyncio
import io
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.types import CallbackQuery

from tgcalendar.bot.middlewares.update_logger import UpdateLoggerMiddleware
from tgcalendar.core.config import Settings
from tgcalendar.core.logger import configure_logger, setup_logging


@pytest.fixture
def log_buffer():
    buffer = io.StringIO()
    yield buffer
    setup_logging()


def test_configured_level_survives_later_loggers(monkeypatch, log_buffer):
    monkeypatch.setenv("BOT_TOKEN", "123456:TEST_TOKEN")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    settings = Settings()

    setup_logging(settings.log_level, sink=log_buffer)
    # what create_dispatcher and module imports do after startup
    middleware = UpdateLoggerMiddleware()
    log = configure_logger(prefix="LATE", color="cyan")

    cb = MagicMock(spec=CallbackQuery)
    cb.data = "NAV_2024_2"
    cb.from_user = MagicMock(id=1)
    asyncio.run(middleware(AsyncMock(), cb, {}))

    log.info("info record must be hidden")
    log.warning("warning record is shown")

    output = log_buffer.getvalue()
    assert "info record must be hidden" not in output
    assert "NAV_2024_2" not in output
    assert "warning record is shown" in output
    assert "LATE" in output


def test_debug_level_lets_info_through(log_buffer):
    setup_logging("DEBUG", sink=log_buffer)
    configure_logger(prefix="CAL").debug("debug record")

    assert "debug record" in log_buffer.getvalue()
