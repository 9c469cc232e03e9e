# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/keyboards/calendar/__init__.py
from .grid import CalendarGridBuilder, build_grid
from .schemas import (
    Action,
    CalendarError,
    CalendarLabels,
    Cell,
    Grid,
    Inert,
    InvalidDate,
    MalformedToken,
    Navigate,
    SelectDay,
    YearMonth,
)

__all__ = [
    "Action",
    "CalendarError",
    "CalendarGridBuilder",
    "CalendarLabels",
    "Cell",
    "Grid",
    "Inert",
    "InvalidDate",
    "MalformedToken",
    "Navigate",
    "SelectDay",
    "YearMonth",
    "build_grid",
]
