"""Template tag that interpolates escaped values into SOQL text."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from string import Formatter

from .errors import InvalidArgumentError
from .sql import escape_value
from .types import SoqlValue

__all__ = ["compose", "soql"]

logger = logging.getLogger(__name__)

_FORMATTER = Formatter()


def compose(segments: Sequence[str], values: Sequence[SoqlValue]) -> str:
    """Interleave literal ``segments`` with escaped ``values``.

    ``segments`` must hold exactly one more item than ``values``.  Segments are
    trusted query text and are copied as-is; every value goes through
    :func:`escape_value` with strings quoted.
    """

    if len(segments) != len(values) + 1:
        raise InvalidArgumentError(
            f"Expected {len(values) + 1} segments for {len(values)} values, got {len(segments)}"
        )

    parts = [segments[0]]
    for value, segment in zip(values, segments[1:]):
        parts.append(escape_value(value))
        parts.append(segment)

    logger.debug("Composed SOQL from %d segments and %d values", len(segments), len(values))
    return "".join(parts)


def _split_template(
    template: str, args: Sequence[SoqlValue], kwargs: dict[str, SoqlValue]
) -> tuple[list[str], list[SoqlValue]]:
    """Split a ``str.format`` style template into segments and values."""

    segments = [""]
    values: list[SoqlValue] = []
    next_index = 0

    try:
        parsed = list(_FORMATTER.parse(template))
    except ValueError as exc:
        raise InvalidArgumentError(f"Malformed SOQL template: {exc}") from exc

    for literal_text, field_name, format_spec, conversion in parsed:
        segments[-1] += literal_text
        if field_name is None:
            continue

        if format_spec or conversion:
            raise InvalidArgumentError(
                f"Format specs and conversions are not supported in SOQL templates: {field_name!r}"
            )

        if field_name == "":
            key: int | str = next_index
            next_index += 1
        elif field_name.isdigit():
            key = int(field_name)
        else:
            key = field_name

        try:
            value = args[key] if isinstance(key, int) else kwargs[key]
        except (IndexError, KeyError) as exc:
            raise InvalidArgumentError(f"No value supplied for template field {key!r}") from exc

        values.append(value)
        segments.append("")

    return segments, values


def soql(template: str, /, *args: SoqlValue, **kwargs: SoqlValue) -> str:
    """Return ``template`` with every replacement field safely escaped.

    Replacement fields follow :meth:`str.format` syntax (``{}``, ``{0}`` or
    ``{name}``) and ``{{``/``}}`` produce literal braces::

        soql("SELECT Id FROM Account WHERE Name = {}", "O'Brien")
        # SELECT Id FROM Account WHERE Name = 'O\\'Brien'
    """

    segments, values = _split_template(template, args, kwargs)
    return compose(segments, values)
