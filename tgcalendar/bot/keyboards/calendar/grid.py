# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/keyboards/calendar/grid.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from .schemas import (
    CalendarLabels,
    Cell,
    Grid,
    InvalidDate,
    Navigate,
    SelectDay,
    YearMonth,
    highlight,
)

WEEK_LENGTH = 7
MAX_WEEKS = 6


class CalendarGridBuilder:
    def __init__(self, labels: Optional[CalendarLabels] = None) -> None:
        """Сборщик сетки месяца; подписи по умолчанию английские."""
        self._labels = labels or CalendarLabels()

    @classmethod
    def for_locale(cls, locale: Optional[str]) -> "CalendarGridBuilder":
        return cls(CalendarLabels.for_locale(locale))

    def build(self, year: int, month: int, today: Optional[date] = None) -> Grid:
        """
        Строит сетку месяца: шапка с навигацией, дни недели, строки с числами.

        Args:
            year: год (datetime.MINYEAR..MAXYEAR).
            month: месяц 1..12.
            today: если попадает в этот месяц, название месяца и число
                выделяются квадратными скобками.

        Raises:
            InvalidDate: месяц или год вне диапазона.
        """
        current = YearMonth.of(year, month)
        is_current = today is not None and (today.year, today.month) == (year, month)

        rows: List[List[Cell]] = [
            self._header_row(current, is_current),
            [self._blank(weekday) for weekday in self._labels.days_of_week],
        ]

        # Строки с числами месяца, начиная с воскресенья
        days_in_month = current.days_in_month()
        offset = current.sunday_weekday()
        day = 1
        for week in range(MAX_WEEKS):
            days_row: List[Cell] = []
            for column in range(WEEK_LENGTH):
                if (week == 0 and column < offset) or day > days_in_month:
                    days_row.append(self._blank())
                    continue
                label = str(day)
                if is_current and today.day == day:
                    label = highlight(label)
                days_row.append(Cell(label=label, action=SelectDay(year=current.year, month=current.month, day=day)))
                day += 1
            rows.append(days_row)
            if day > days_in_month:
                break

        return Grid(year_month=current, rows=rows)

    def _header_row(self, current: YearMonth, is_current: bool) -> List[Cell]:
        title = f"{self._labels.months[current.month - 1]} {current.year}"
        return [
            self._nav(current, -1, self._labels.prev_caption),
            self._blank(highlight(title) if is_current else title),
            self._nav(current, 1, self._labels.next_caption),
        ]

    def _nav(self, current: YearMonth, step: int, caption: str) -> Cell:
        try:
            target = current.shift(step)
        except InvalidDate:
            # January of MINYEAR / December of MAXYEAR
            return self._blank()
        return Cell(label=caption, action=Navigate(target=target))

    def _blank(self, label: Optional[str] = None) -> Cell:
        return Cell(label=self._labels.blank_caption if label is None else label)


def build_grid(
    year: int,
    month: int,
    *,
    labels: Optional[CalendarLabels] = None,
    today: Optional[date] = None,
) -> Grid:
    """Сетка месяца с подписями ``labels`` (см. CalendarGridBuilder.build)."""
    return CalendarGridBuilder(labels).build(year, month, today=today)
