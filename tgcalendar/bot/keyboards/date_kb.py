# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/keyboards/date_kb.py
from __future__ import annotations

from datetime import date
from typing import Optional

from aiogram.types import InlineKeyboardMarkup

from tgcalendar.bot.keyboards.calendar import CalendarGridBuilder, CalendarLabels
from tgcalendar.bot.keyboards.utils import render_grid


def create_calendar_kb(
    year: int,
    month: int,
    labels: Optional[CalendarLabels] = None,
    today: Optional[date] = None,
) -> InlineKeyboardMarkup:
    """Создает inline-клавиатуру календаря на указанный месяц."""
    grid = CalendarGridBuilder(labels).build(year, month, today=today)
    return render_grid(grid)
