"""Exceptions raised while escaping values or composing queries."""

from __future__ import annotations

__all__ = ["SoqlError", "InvalidArgumentError", "UnsupportedTypeError"]


class SoqlError(Exception):
    """Base class for every error raised by :mod:`soqlescape`."""


class InvalidArgumentError(SoqlError, ValueError):
    """A value has the right kind but violates a runtime precondition.

    Raised for non-finite numbers, invalid instants, empty ``IN`` lists,
    unknown date literals and malformed templates.
    """


class UnsupportedTypeError(SoqlError, TypeError):
    """A value does not belong to any kind the escaper understands."""
