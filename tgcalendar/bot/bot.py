# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/bot.py
from __future__ import annotations

import asyncio

from aiogram import Bot, Dispatcher

from tgcalendar.bot.commands import set_bot_commands
from tgcalendar.bot.keyboards.calendar import CalendarLabels
from tgcalendar.bot.middlewares.update_logger import UpdateLoggerMiddleware
from tgcalendar.bot.routers import calendar_router
from tgcalendar.core.config import Settings, get_settings
from tgcalendar.core.logger import configure_logger, setup_logging


def create_dispatcher(settings: Settings) -> Dispatcher:
    """Собирает Dispatcher: middleware, роутер и подписи календаря."""
    dp = Dispatcher()
    dp["labels"] = CalendarLabels.for_locale(settings.calendar_locale)

    dp.message.middleware(UpdateLoggerMiddleware())
    dp.callback_query.middleware(UpdateLoggerMiddleware())

    dp.include_router(calendar_router)
    return dp


async def main():
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = configure_logger("[BOT]", "green")
    logger.info("Starting calendar bot application")

    bot = Bot(token=settings.bot_token)
    dp = create_dispatcher(settings)

    # Регистрация команд
    await set_bot_commands(bot)

    try:
        me = await bot.get_me()
        logger.info(f"Bot is running as @{me.username}, start polling...")
        await dp.start_polling(bot)
    finally:
        logger.info("Bot is shutting down...")
        await bot.session.close()


def run():
    """Точка входа console-скрипта ``tgcalendar-bot``."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
