# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/commands.py
from aiogram import Bot
from aiogram.types import BotCommand, BotCommandScopeDefault

async def set_bot_commands(bot: Bot):
    """
    Регистрирует команды бота в меню Telegram.
    """
    commands = [
        BotCommand(command="calendar", description="Show the calendar"),
    ]
    await bot.set_my_commands(commands, scope=BotCommandScopeDefault())
