# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/routers/calendar_router.py
"""Календарь в чате.

Команды запуска:
    ▸ /calendar

Порядок действий:
    1) /calendar        — клавиатура на текущий месяц.
    2) «<» / «>»        — та же клавиатура перерисовывается на соседний месяц.
    3) Нажатие на число — всплывающее подтверждение выбранной даты.

Месяц нигде не хранится: он всегда берётся из callback_data нажатой кнопки.
"""

from __future__ import annotations

from datetime import date
from typing import Final, Optional

from aiogram import F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from tgcalendar.bot.keyboards.calendar import (
    CalendarLabels,
    Inert,
    MalformedToken,
    Navigate,
    SelectDay,
    codec,
)
from tgcalendar.bot.keyboards.date_kb import create_calendar_kb
from tgcalendar.core.logger import configure_logger

__all__ = ["router"]

# ─────────────────────────── ТЕКСТОВЫЕ КОНСТАНТЫ UI ────────────────────────────
MSG_CHOOSE_DATE:    Final = "Please choose a date:"
MSG_SEND_CALENDAR:  Final = "Send /calendar to see the calendar."
MSG_DATE_CHOSEN:    Final = "You chose: {}"
MSG_UNKNOWN_BUTTON: Final = "Unknown button"

# ────────────────────────────── РОУТЕР И ЛОГГЕР ───────────────────────────────
router: Final = Router()
log = configure_logger(prefix="CALENDAR", color="cyan")


# ─────────────────────────────── /calendar ────────────────────────────────────
@router.message(Command("calendar", ignore_case=True))
async def cmd_calendar(msg: Message, labels: Optional[CalendarLabels] = None) -> None:
    """Отправляет календарь на текущий месяц."""
    today = date.today()
    kb = create_calendar_kb(today.year, today.month, labels=labels, today=today)

    log.info(f"Chat {msg.chat.id}: calendar for {today.year}-{today.month:02d}")
    await msg.answer(MSG_CHOOSE_DATE, reply_markup=kb)


@router.message(F.text)
async def fallback_text(msg: Message) -> None:
    """Любой другой текст — подсказка про /calendar."""
    await msg.answer(MSG_SEND_CALENDAR)


# ─────────────────────────── НАЖАТИЯ НА КНОПКИ ────────────────────────────────
@router.callback_query()
async def on_calendar_tap(cb: CallbackQuery, labels: Optional[CalendarLabels] = None) -> None:
    """Выбор дня, листание месяцев или нажатие на пустую кнопку."""
    try:
        action = codec.decode(cb.data or "")
    except MalformedToken as exc:
        log.warning(f"User {cb.from_user.id}: {exc}")
        await cb.answer(MSG_UNKNOWN_BUTTON)
        return

    if isinstance(action, Inert):
        await cb.answer(cache_time=60)

    elif isinstance(action, SelectDay):
        chosen = action.as_date().isoformat()
        log.info(f"User {cb.from_user.id}: selected {chosen}")
        await cb.answer(MSG_DATE_CHOSEN.format(chosen))

    elif isinstance(action, Navigate):
        target = action.target
        log.info(f"User {cb.from_user.id}: navigate to {target.year}-{target.month:02d}")
        kb = create_calendar_kb(target.year, target.month, labels=labels, today=date.today())
        if cb.message is None:
            log.warning(f"User {cb.from_user.id}: calendar message is no longer available")
        else:
            try:
                await cb.message.edit_reply_markup(reply_markup=kb)
            except TelegramBadRequest as exc:
                # Два быстрых нажатия на одну стрелку: «message is not modified»
                log.warning(f"Failed to redraw calendar: {exc.message}")
        await cb.answer()

    else:
        raise TypeError(f"Unexpected calendar action: {action!r}")
