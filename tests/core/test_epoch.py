from __future__ import annotations

import datetime as dt

from hypothesis import given, strategies as st

from tle_parser import parse

SECONDS_PER_DAY = 86_400
MICROS_PER_DAY = SECONDS_PER_DAY * 1_000_000

BASE_LINE1 = b"1 25544U 98067A   20344.91719907  .00001264  00000-0  29621-4 0  9993"
BASE_LINE2 = b"2 25544  51.6466 223.8666 0002416  90.3778  30.6140 15.48970462256430"
PREFIX = BASE_LINE1[:18]
SUFFIX = BASE_LINE1[32:]


def build_line1(year: int, day: int, seconds: int, micros: int) -> bytes:
    total_micro = seconds * 1_000_000 + micros
    frac_scaled = round(total_micro * 100_000_000 / MICROS_PER_DAY)
    adj_day = day
    if frac_scaled >= 100_000_000:
        adj_day += 1
        frac_scaled -= 100_000_000
    epoch_field = f"{year % 100:02d}{adj_day:03d}.{frac_scaled:08d}".encode("ascii")
    return PREFIX + epoch_field + SUFFIX


@given(
    st.integers(min_value=1957, max_value=2056),
    st.integers(min_value=1, max_value=366),
    st.integers(min_value=0, max_value=86399),
    st.integers(min_value=0, max_value=999_999),
)
def test_epoch_matches_manual(year: int, day: int, seconds: int, micros: int) -> None:
    tle = parse(build_line1(year, day, seconds, micros), BASE_LINE2)
    result = tle.epoch
    expected = dt.datetime(year, 1, 1, tzinfo=dt.timezone.utc) + dt.timedelta(
        days=day - 1, seconds=seconds, microseconds=micros
    )
    assert tle.epoch_year == year % 100
    assert result.tzinfo is dt.timezone.utc
    assert result.year == expected.year
    assert abs(result - expected) <= dt.timedelta(microseconds=900)
