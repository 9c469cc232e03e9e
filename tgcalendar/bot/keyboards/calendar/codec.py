# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/keyboards/calendar/codec.py
"""
Кодирование действий календаря в callback_data и обратно.

Форматы токенов (разделитель «_», числа без ведущих нулей):
    ▸ DAY_<year>_<month>_<day>  — выбор дня;
    ▸ NAV_<year>_<month>        — переход к месяцу;
    ▸ IGNORE                    — пустая/служебная кнопка.
"""

from __future__ import annotations

from typing import Dict, Optional, Type, Union

from aiogram.filters.callback_data import CallbackData
from pydantic import ValidationError

from .schemas import Action, Inert, MalformedToken, Navigate, SelectDay, YearMonth

IGNORE = "IGNORE"
SEPARATOR = "_"


class DayCallback(CallbackData, prefix="DAY", sep=SEPARATOR):
    """callback_data кнопки с числом месяца."""
    year: int
    month: int
    day: int


class NavCallback(CallbackData, prefix="NAV", sep=SEPARATOR):
    """callback_data стрелок «<» / «>»."""
    year: int
    month: int


_CALLBACKS: Dict[str, Type[CallbackData]] = {
    DayCallback.__prefix__: DayCallback,
    NavCallback.__prefix__: NavCallback,
}


def encode_navigate(target: YearMonth) -> str:
    return NavCallback(year=target.year, month=target.month).pack()


def encode_select_day(year: int, month: int, day: int) -> str:
    return DayCallback(year=year, month=month, day=day).pack()


def encode_inert() -> str:
    return IGNORE


def encode(action: Optional[Action]) -> str:
    """Токен для действия ячейки; ``None`` и ``Inert`` дают IGNORE."""
    if action is None or isinstance(action, Inert):
        return encode_inert()
    if isinstance(action, Navigate):
        return encode_navigate(action.target)
    if isinstance(action, SelectDay):
        return encode_select_day(action.year, action.month, action.day)
    raise TypeError(f"Unsupported calendar action: {action!r}")


def decode(token: str) -> Union[Navigate, SelectDay, Inert]:
    """
    Разбирает callback_data обратно в действие.

    Принимаются только канонические токены (те, что выдаёт ``encode``):
    ``encode(decode(token)) == token`` для любого успешно разобранного токена.

    Raises:
        MalformedToken: неизвестный тег, неверное число полей, не целые поля,
            несуществующая дата/месяц или неканоническая запись чисел.
    """
    if token == IGNORE:
        return Inert()

    tag = token.split(SEPARATOR, 1)[0]
    callback_cls = _CALLBACKS.get(tag)
    if callback_cls is None or tag == token:
        raise MalformedToken(token, "unknown tag")

    try:
        data = callback_cls.unpack(token)
    except (TypeError, ValueError) as exc:
        # pydantic.ValidationError is a ValueError subclass
        raise MalformedToken(token, _reason(exc)) from exc

    try:
        if isinstance(data, DayCallback):
            action = SelectDay(year=data.year, month=data.month, day=data.day)
        else:
            action = Navigate(target=YearMonth(year=data.year, month=data.month))
    except ValidationError as exc:
        raise MalformedToken(token, "not a calendar date") from exc

    if encode(action) != token:
        raise MalformedToken(token, "non-canonical fields")
    return action


def _reason(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "non-integer field"
    if isinstance(exc, TypeError):
        return "wrong field count"
    return str(exc)
