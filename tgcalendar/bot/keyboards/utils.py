# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/keyboards/utils.py
"""
Утилиты для превращения сетки календаря в InlineKeyboardMarkup.
"""

from typing import List

from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from tgcalendar.bot.keyboards.calendar import codec
from tgcalendar.bot.keyboards.calendar.schemas import Cell, Grid

# Telegram отвергает callback_data длиннее 64 байт
MAX_CALLBACK_BYTES = 64


def cell_button(cell: Cell) -> InlineKeyboardButton:
    """Кнопка для одной ячейки; у пустых ячеек callback_data = IGNORE."""
    callback_data = codec.encode(cell.action)
    if len(callback_data.encode("utf-8")) > MAX_CALLBACK_BYTES:
        raise ValueError(f"callback_data too long for Telegram: {callback_data!r}")
    return InlineKeyboardButton(text=cell.label, callback_data=callback_data)


def render_grid(grid: Grid) -> InlineKeyboardMarkup:
    """
    Формирует клавиатуру строка-в-строку с сеткой:

    • шапка — 3 кнопки («<», месяц, «>»);
    • дни недели и строки с числами — по 7 кнопок.
    """
    rows: List[List[InlineKeyboardButton]] = [
        [cell_button(cell) for cell in row] for row in grid.rows
    ]
    return InlineKeyboardMarkup(inline_keyboard=rows)
