"""Constructors and type guards for tagged values."""

from __future__ import annotations

from datetime import date as _date
from datetime import datetime

from .dates import normalize_date_literal, to_utc_timestamp
from .types import DateValue, LikeValue, RawValue, TaggedValue, ValueTag

__all__ = ["date", "is_date_value", "is_like_value", "is_raw_value", "like", "literal", "raw"]


def raw(value: str) -> RawValue:
    """Return ``value`` wrapped so it is inserted without any escaping.

    Only use this for trusted fragments such as field names or operators::

        soql("SELECT {} FROM Account", raw("Name"))
        # SELECT Name FROM Account
    """

    return RawValue(value)


def like(value: str) -> LikeValue:
    """Return ``value`` wrapped for use as a ``LIKE`` pattern.

    ``%``, ``_`` and ``\\`` inside ``value`` are escaped so they match
    literally.
    """

    return LikeValue(value)


def date(value: _date | datetime | str) -> DateValue:
    """Return ``value`` wrapped so it renders as ``YYYY-MM-DD``."""

    return DateValue(to_utc_timestamp(value))


def literal(keyword: str, n: int | None = None) -> RawValue:
    """Return a SOQL relative date literal such as ``TODAY`` or ``LAST_N_DAYS:30``.

    Both ``literal("LAST_N_DAYS:30")`` and ``literal("LAST_N_DAYS", 30)`` are
    accepted.  Unknown keywords raise :class:`InvalidArgumentError`.
    """

    return RawValue(normalize_date_literal(keyword, n))


def _has_tag(value: object, tag: ValueTag) -> bool:
    return isinstance(value, TaggedValue) and value.tag is tag


def is_raw_value(value: object) -> bool:
    return _has_tag(value, ValueTag.RAW)


def is_like_value(value: object) -> bool:
    return _has_tag(value, ValueTag.LIKE)


def is_date_value(value: object) -> bool:
    return _has_tag(value, ValueTag.DATE)
