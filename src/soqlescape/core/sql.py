"""Helper utilities for turning Python values into SOQL fragments.

This module keeps every escaping rule in one place so the rest of the
codebase only has to decide *where* a value goes, never *how* it is written.
Having a single source of truth for escaping reduces the chance of subtle
mistakes (for instance forgetting to escape a backslash before a quote) and
keeps the generated SOQL deterministic for the snapshot tests.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal

import pandas as pd
from pandas.api.types import is_bool, is_float, is_integer, is_list_like

from .dates import format_date, format_datetime
from .errors import InvalidArgumentError, UnsupportedTypeError
from .types import SoqlValue, TaggedValue, ValueTag

__all__ = [
    "escape_array",
    "escape_like",
    "escape_string",
    "escape_value",
    "format_literal",
    "format_number",
]

# Order matters: the backslash has to be doubled before any replacement
# introduces a backslash of its own.
_QUOTE_ESCAPES = (("\\", "\\\\"), ("'", "\\'"))
_WILDCARD_ESCAPES = (("%", "\\%"), ("_", "\\_"))
_CONTROL_ESCAPES = (("\n", "\\n"), ("\r", "\\r"), ("\t", "\\t"), ("\0", "\\0"))

_STRING_ESCAPES = _QUOTE_ESCAPES + _CONTROL_ESCAPES
_LIKE_ESCAPES = _QUOTE_ESCAPES + _WILDCARD_ESCAPES + _CONTROL_ESCAPES


def _replace_all(value: str, replacements: tuple[tuple[str, str], ...]) -> str:
    for old, new in replacements:
        value = value.replace(old, new)
    return value


def escape_string(value: str) -> str:
    """Escape ``value`` for use inside a quoted SOQL string literal.

    Quotes, backslashes and the control characters SOQL understands as escape
    sequences are handled.  The result is *not* wrapped in quotes.
    """

    return _replace_all(value, _STRING_ESCAPES)


def escape_like(value: str) -> str:
    """Escape ``value`` for use inside a ``LIKE`` pattern.

    In addition to :func:`escape_string`, the ``%`` and ``_`` wildcards are
    escaped so they only match themselves.
    """

    return _replace_all(value, _LIKE_ESCAPES)


def format_literal(value: str) -> str:
    """Return ``value`` escaped and wrapped in single quotes."""

    return "'{}'".format(escape_string(value))


def format_number(value: int | float | Decimal) -> str:
    """Return the canonical SOQL spelling of a finite number."""

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidArgumentError(f"Invalid SOQL number value: {value!r}")
        return format(value, "f")

    if is_integer(value):
        return str(int(value))

    number = float(value)
    if not math.isfinite(number):
        raise InvalidArgumentError(f"Invalid SOQL number value: {value!r}")
    # str() gives the shortest spelling at the value's own precision
    # (numpy float32 included); SOQL has no exponent notation.
    return format(Decimal(str(value)), "f")


def _is_array(value: object) -> bool:
    """Return ``True`` for ordered containers usable in an ``IN`` clause.

    Sets and mappings are excluded because their iteration order is not part
    of their value.  Data frames iterate over column labels and are excluded
    too.
    """

    if isinstance(value, (Mapping, pd.DataFrame)):
        return False
    return is_list_like(value, allow_sets=False)


def escape_array(values: Iterable[SoqlValue]) -> str:
    """Return ``values`` formatted for use inside ``IN`` style expressions.

    Every element is escaped on its own and strings are always quoted.
    """

    items = list(values)
    if not items:
        raise InvalidArgumentError(
            "Empty arrays are not allowed in SOQL IN clauses; "
            "skip the query or provide at least one value"
        )
    return "({})".format(", ".join(escape_value(item) for item in items))


def _escape_tagged(value: TaggedValue, wrap_strings: bool) -> str:
    if value.tag is ValueTag.RAW:
        return value.value
    if value.tag is ValueTag.LIKE:
        escaped = escape_like(value.value)
        return f"'{escaped}'" if wrap_strings else escaped
    if value.tag is ValueTag.DATE:
        return format_date(value.value)
    raise UnsupportedTypeError(f"Unsupported SOQL value tag: {value.tag!r}")


def escape_value(value: SoqlValue, wrap_strings: bool = True) -> str:
    """Escape ``value`` according to its kind.

    Kinds are checked in a fixed order: null, tagged wrappers, arrays,
    booleans, numbers, datetimes and dates, then strings.  ``wrap_strings``
    controls whether string-like results are quoted; array elements are
    always quoted regardless.
    """

    if value is None or value is pd.NA:
        return "null"

    if isinstance(value, TaggedValue):
        return _escape_tagged(value, wrap_strings)

    if _is_array(value):
        return escape_array(value)

    if is_bool(value):
        return "true" if value else "false"

    if isinstance(value, Decimal) or is_integer(value) or is_float(value):
        return format_number(value)

    if value is pd.NaT or isinstance(value, datetime):
        if pd.isna(value):
            raise InvalidArgumentError(f"Invalid datetime value: {value!r}")
        return format_datetime(value)

    if isinstance(value, date):
        return format_date(value)

    if isinstance(value, str):
        return format_literal(value) if wrap_strings else escape_string(value)

    raise UnsupportedTypeError(f"Unsupported SOQL value type: {type(value).__name__}")
