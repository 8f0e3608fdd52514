"""Public data structures describing values that can be interpolated."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Literal, Sequence, Union

__all__ = [
    "DateLiteral",
    "DateValue",
    "LikeValue",
    "RawValue",
    "SoqlValue",
    "TaggedValue",
    "ValueTag",
]


class ValueTag(Enum):
    """Closed set of wrapper kinds recognised by the escaper."""

    RAW = "raw"
    LIKE = "like"
    DATE = "date"


@dataclass(frozen=True)
class TaggedValue:
    """Base class for values that carry an explicit escaping instruction.

    The escaper only treats an object as a wrapper when it is an instance of
    this class, so caller data that happens to expose a ``value`` attribute is
    never mistaken for one.  Subclasses pin :attr:`tag` to a single
    :class:`ValueTag` member and classification is done by inspecting it.
    """

    tag: ClassVar[ValueTag]


@dataclass(frozen=True)
class RawValue(TaggedValue):
    """Trusted fragment inserted into the query verbatim."""

    tag: ClassVar[ValueTag] = ValueTag.RAW

    value: str


@dataclass(frozen=True)
class LikeValue(TaggedValue):
    """String destined for a ``LIKE`` clause; wildcards are escaped too."""

    tag: ClassVar[ValueTag] = ValueTag.LIKE

    value: str


@dataclass(frozen=True)
class DateValue(TaggedValue):
    """Instant rendered as a date-only literal (``YYYY-MM-DD``)."""

    tag: ClassVar[ValueTag] = ValueTag.DATE

    value: datetime


DateLiteral = Literal[
    "YESTERDAY",
    "TODAY",
    "TOMORROW",
    "LAST_WEEK",
    "THIS_WEEK",
    "NEXT_WEEK",
    "LAST_MONTH",
    "THIS_MONTH",
    "NEXT_MONTH",
    "LAST_90_DAYS",
    "NEXT_90_DAYS",
    "THIS_QUARTER",
    "LAST_QUARTER",
    "NEXT_QUARTER",
    "THIS_YEAR",
    "LAST_YEAR",
    "NEXT_YEAR",
    "THIS_FISCAL_QUARTER",
    "LAST_FISCAL_QUARTER",
    "NEXT_FISCAL_QUARTER",
    "THIS_FISCAL_YEAR",
    "LAST_FISCAL_YEAR",
    "NEXT_FISCAL_YEAR",
]

SoqlValue = Union[
    None,
    str,
    bool,
    int,
    float,
    Decimal,
    date,
    datetime,
    TaggedValue,
    Sequence["SoqlValue"],
]
