"""Shared helper utilities for assembling dynamic parts of a SOQL query."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from .errors import InvalidArgumentError
from .helpers import raw
from .sql import escape_value
from .types import RawValue, SoqlValue


def join(values: Sequence[SoqlValue], separator: str = ", ") -> RawValue:
    """Escape every value and join them with ``separator``.

    The result is raw so interpolating it does not escape or quote it again::

        fields = [raw(name) for name in ("Name", "Email", "Phone")]
        soql("SELECT {} FROM Contact", join(fields))
        # SELECT Name, Email, Phone FROM Contact
    """

    return raw(separator.join(escape_value(value) for value in values))


def join_where_clauses(
    clauses: Sequence[SoqlValue], *, operator: Literal["AND", "OR"] = "AND"
) -> RawValue:
    """Join ``clauses`` with ``operator`` while wrapping each clause in parentheses."""

    if operator not in {"AND", "OR"}:
        raise InvalidArgumentError(f"operator must be 'AND' or 'OR', got {operator!r}")
    if not clauses:
        raise InvalidArgumentError("At least one clause is required")

    return raw(f" {operator} ".join(f"({escape_value(clause)})" for clause in clauses))


def join_where_clauses_or(clauses: Sequence[SoqlValue]) -> RawValue:
    return join_where_clauses(clauses, operator="OR")


__all__ = [
    "join",
    "join_where_clauses",
    "join_where_clauses_or",
]
