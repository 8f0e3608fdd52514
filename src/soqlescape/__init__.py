"""Public package API."""

from importlib import metadata

from .core import (
    DateLiteral,
    DateValue,
    InvalidArgumentError,
    LikeValue,
    RawValue,
    SoqlError,
    SoqlValue,
    UnsupportedTypeError,
    ValueTag,
    compose,
    date,
    escape_array,
    escape_like,
    escape_string,
    escape_value,
    format_date,
    format_datetime,
    is_date_value,
    is_like_value,
    is_raw_value,
    join,
    join_where_clauses,
    join_where_clauses_or,
    like,
    literal,
    raw,
    soql,
)

__all__ = [
    "soql",
    "compose",
    "raw",
    "like",
    "date",
    "literal",
    "join",
    "join_where_clauses",
    "join_where_clauses_or",
    "escape_string",
    "escape_like",
    "escape_value",
    "escape_array",
    "format_date",
    "format_datetime",
    "is_raw_value",
    "is_like_value",
    "is_date_value",
    "RawValue",
    "LikeValue",
    "DateValue",
    "ValueTag",
    "DateLiteral",
    "SoqlValue",
    "SoqlError",
    "InvalidArgumentError",
    "UnsupportedTypeError",
]

try:
    __version__ = metadata.version("soqlescape")
except (
    metadata.PackageNotFoundError
):  # pragma: no cover - fallback for editable installs
    __version__ = "0.0.0"
