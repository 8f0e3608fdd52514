"""Helpers for rendering instants and relative date literals."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import get_args

import pandas as pd

from .errors import InvalidArgumentError
from .types import DateLiteral

__all__ = ["format_date", "format_datetime", "normalize_date_literal", "to_utc_timestamp"]

_FIXED_DATE_LITERALS = frozenset(get_args(DateLiteral))

_N_DATE_LITERAL_UNITS = (
    "DAYS",
    "WEEKS",
    "MONTHS",
    "QUARTERS",
    "YEARS",
    "FISCAL_QUARTERS",
    "FISCAL_YEARS",
)

_N_DATE_LITERAL_PATTERN = re.compile(
    r"(?:LAST|NEXT)_N_(?:{units}):[0-9]+".format(units="|".join(_N_DATE_LITERAL_UNITS))
)


def to_utc_timestamp(instant: date | datetime | str) -> pd.Timestamp:
    """Return ``instant`` as a UTC :class:`pandas.Timestamp`.

    Naive values are taken to be in UTC already so the output never depends
    on the local timezone of the machine running the code.
    """

    try:
        ts = pd.Timestamp(instant)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid date value: {instant!r}") from exc

    if pd.isna(ts):
        raise InvalidArgumentError(f"Invalid date value: {instant!r}")

    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def format_date(instant: date | datetime | str) -> str:
    """Format ``instant`` as a SOQL date literal (``YYYY-MM-DD``)."""

    ts = to_utc_timestamp(instant)
    return f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"


def format_datetime(instant: datetime | str) -> str:
    """Format ``instant`` as a SOQL datetime literal (``YYYY-MM-DDThh:mm:ssZ``).

    Sub-second precision is truncated, not rounded.
    """

    ts = to_utc_timestamp(instant)
    return (
        f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"
        f"T{ts.hour:02d}:{ts.minute:02d}:{ts.second:02d}Z"
    )


def normalize_date_literal(keyword: str, n: int | None = None) -> str:
    """Validate a relative date literal and return its canonical spelling.

    ``keyword`` is matched case-insensitively.  When ``n`` is given,
    ``keyword`` is the prefix of a parameterised literal such as
    ``LAST_N_DAYS`` and the two are combined into ``LAST_N_DAYS:n``.
    """

    normalized = keyword.strip().upper()
    if n is not None:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidArgumentError(f"Date literal count must be a non-negative integer: {n!r}")
        normalized = f"{normalized}:{n}"

    if normalized in _FIXED_DATE_LITERALS:
        return normalized
    if _N_DATE_LITERAL_PATTERN.fullmatch(normalized):
        return normalized
    raise InvalidArgumentError(f"Unknown SOQL date literal: {keyword!r}")
