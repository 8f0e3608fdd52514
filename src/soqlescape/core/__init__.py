from .dates import format_date, format_datetime
from .errors import InvalidArgumentError, SoqlError, UnsupportedTypeError
from .helpers import date, is_date_value, is_like_value, is_raw_value, like, literal, raw
from .query_helpers import join, join_where_clauses, join_where_clauses_or
from .sql import escape_array, escape_like, escape_string, escape_value
from .template import compose, soql
from .types import DateLiteral, DateValue, LikeValue, RawValue, SoqlValue, ValueTag

__all__ = [
    "DateLiteral",
    "DateValue",
    "InvalidArgumentError",
    "LikeValue",
    "RawValue",
    "SoqlError",
    "SoqlValue",
    "UnsupportedTypeError",
    "ValueTag",
    "compose",
    "date",
    "escape_array",
    "escape_like",
    "escape_string",
    "escape_value",
    "format_date",
    "format_datetime",
    "is_date_value",
    "is_like_value",
    "is_raw_value",
    "join",
    "join_where_clauses",
    "join_where_clauses_or",
    "like",
    "literal",
    "raw",
    "soql",
]
