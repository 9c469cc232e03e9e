# -*- coding: utf-8 -*-
# TgCalendar/tgcalendar/bot/keyboards/calendar/schemas.py
import calendar
import locale as _locale
from datetime import MAXYEAR, MINYEAR, date
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, conlist, model_validator

from tgcalendar.core.logger import configure_logger

log = configure_logger(prefix="CAL", color="cyan")


# --------------------------------------------------------------------------- #
# Errors                                                                      #
# --------------------------------------------------------------------------- #
class CalendarError(ValueError):
    """Базовая ошибка календаря."""


class InvalidDate(CalendarError):
    """Год/месяц (или дата) вне допустимого диапазона."""

    def __init__(self, year: int, month: int, day: Optional[int] = None) -> None:
        self.year, self.month, self.day = year, month, day
        shown = f"{year}-{month}" if day is None else f"{year}-{month}-{day}"
        super().__init__(f"Invalid calendar date: {shown}")


class MalformedToken(CalendarError):
    """callback_data не распознан."""

    def __init__(self, token: str, reason: str = "unrecognised shape") -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"Malformed calendar token {token!r}: {reason}")


# --------------------------------------------------------------------------- #
# Values                                                                      #
# --------------------------------------------------------------------------- #
class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class YearMonth(_Frozen):
    """Месяц конкретного года (month 1..12, year в пределах datetime)."""
    year: int
    month: int

    @model_validator(mode="after")
    def _check_range(self) -> "YearMonth":
        if not 1 <= self.month <= 12 or not MINYEAR <= self.year <= MAXYEAR:
            raise ValueError(f"{self.year}-{self.month} is out of range")
        return self

    @classmethod
    def of(cls, year: int, month: int) -> "YearMonth":
        """Как конструктор, но бросает InvalidDate вместо ValidationError."""
        try:
            return cls(year=year, month=month)
        except ValidationError as exc:
            raise InvalidDate(year, month) from exc

    def shift(self, months: int) -> "YearMonth":
        """Сдвиг на ``months`` месяцев с переходом через границу года."""
        index = self.year * 12 + (self.month - 1) + months
        return YearMonth.of(index // 12, index % 12 + 1)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    def sunday_weekday(self) -> int:
        """Индекс дня недели первого числа: 0=Sunday ... 6=Saturday."""
        return (self.first_day().weekday() + 1) % 7


class Navigate(_Frozen):
    kind: Literal["nav"] = "nav"
    target: YearMonth


class SelectDay(_Frozen):
    kind: Literal["day"] = "day"
    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def _check_date(self) -> "SelectDay":
        try:
            self.as_date()
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"{self.year}-{self.month}-{self.day} is not a calendar date") from exc
        return self

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


class Inert(_Frozen):
    kind: Literal["ignore"] = "ignore"


Action = Union[Navigate, SelectDay, Inert]


class Cell(_Frozen):
    """Одна кнопка сетки: подпись + действие (None у пустых/заголовков)."""
    label: str
    action: Optional[Union[Navigate, SelectDay]] = None

    @property
    def is_inert(self) -> bool:
        return self.action is None


class Grid(_Frozen):
    """Сетка месяца: шапка, дни недели и 1..6 строк с числами."""
    year_month: YearMonth
    rows: List[List[Cell]]

    @property
    def header(self) -> List[Cell]:
        return self.rows[0]

    @property
    def weekdays(self) -> List[Cell]:
        return self.rows[1]

    @property
    def weeks(self) -> List[List[Cell]]:
        return self.rows[2:]

    def day_cells(self) -> List[Cell]:
        return [cell for week in self.weeks for cell in week if isinstance(cell.action, SelectDay)]


# --------------------------------------------------------------------------- #
# Labels                                                                      #
# --------------------------------------------------------------------------- #
class CalendarLabels(BaseModel):
    """Подписи календаря; дни недели всегда начинаются с воскресенья."""
    days_of_week: conlist(str, max_length=7, min_length=7) = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    months: conlist(str, max_length=12, min_length=12) = [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]
    prev_caption: str = Field(default="<", description="Кнопка предыдущего месяца")
    next_caption: str = Field(default=">", description="Кнопка следующего месяца")
    blank_caption: str = Field(default=" ", description="Пустая ячейка")

    @classmethod
    def for_locale(cls, name: Optional[str]) -> "CalendarLabels":
        """Подписи из системной локали; при её отсутствии остаются английские."""
        labels = cls()
        if not name:
            return labels
        try:
            with calendar.different_locale(name):
                day_abbr = list(calendar.day_abbr)
                labels.months = list(calendar.month_name)[1:]
        except _locale.Error:
            log.warning(f"Locale {name!r} is not available, using default labels")
            return labels
        # calendar.day_abbr starts on Monday
        labels.days_of_week = day_abbr[-1:] + day_abbr[:-1]
        return labels


HIGHLIGHT_FORMAT = "[{}]"


def highlight(text: str) -> str:
    """Выделяет текст квадратными скобками."""
    return HIGHLIGHT_FORMAT.format(text)
