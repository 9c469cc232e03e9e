import pytest

from tgcalendar.bot.keyboards.calendar import Inert, MalformedToken, Navigate, SelectDay, YearMonth
from tgcalendar.bot.keyboards.calendar import codec


def test_encode_shapes():
    assert codec.encode_inert() == "IGNORE"
    assert codec.encode_select_day(2024, 3, 15) == "DAY_2024_3_15"
    assert codec.encode_navigate(YearMonth(year=2024, month=2)) == "NAV_2024_2"
    assert codec.encode(None) == "IGNORE"
    assert codec.encode(Inert()) == "IGNORE"


def test_decode_known_tokens():
    assert codec.decode("IGNORE") == Inert()
    assert codec.decode("DAY_2024_3_15") == SelectDay(year=2024, month=3, day=15)
    assert codec.decode("NAV_2024_2") == Navigate(target=YearMonth(year=2024, month=2))


def test_ignore_never_becomes_an_action():
    action = codec.decode("IGNORE")
    assert not isinstance(action, (Navigate, SelectDay))


@pytest.mark.parametrize(
    "token",
    [
        "IGNORE",
        "DAY_2024_3_15",
        "DAY_2024_12_31",
        "DAY_2024_2_29",
        "NAV_2024_2",
        "NAV_1_1",
        "NAV_9999_12",
    ],
)
def test_token_round_trip(token):
    assert codec.encode(codec.decode(token)) == token


@pytest.mark.parametrize(
    "token",
    [
        "DAY_abc_3_15",       # non-integer field
        "NAV_2024",           # too few fields
        "NAV_2024_2_1",       # too many fields
        "DAY_2024_3",
        "DAY_2024__15",       # empty field
        "NAV_2024_x",
        "WEEK_2024_3",        # unknown tag
        "DAY",
        "NAV",
        "",
        "ignore",
        "IGNORE_1",
        "nav_2024_2",
        "DAY_2023_2_29",      # not a calendar date
        "DAY_2024_4_31",
        "NAV_2024_13",
        "NAV_2024_0",
        "NAV_0_5",
        "NAV_-1_5",
        "DAY_2024_03_15",     # non-canonical
        "NAV_+2024_2",
        "custom_calendar:DAY:2024:3:15",
    ],
)
def test_malformed_tokens(token):
    with pytest.raises(MalformedToken) as exc_info:
        codec.decode(token)
    assert exc_info.value.token == token


def test_malformed_token_is_value_error():
    with pytest.raises(ValueError):
        codec.decode("NAV_2024")


def test_encode_rejects_unknown_action():
    with pytest.raises(TypeError):
        codec.encode("DAY_2024_3_15")


def test_tokens_fit_telegram_limit():
    longest = codec.encode_select_day(9999, 12, 31)
    assert len(longest.encode("utf-8")) <= 64
