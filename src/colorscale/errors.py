from __future__ import annotations

"""Exception types raised by the colorscale library.

Every error derives from :class:`ColorScaleError` and also from the builtin
exception that best describes it, so callers that already catch
``ValueError``/``IndexError`` keep working.
"""


class ColorScaleError(Exception):
    """Base class for all colorscale errors."""


class InvalidColorFormat(ColorScaleError, ValueError):
    """A color string is not a well-formed 3/6/8-digit hex color."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        message = f"invalid hex color: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.value = value


class OutOfRangeStep(ColorScaleError, IndexError):
    """A scale step outside 1..12 was requested."""

    def __init__(self, step: object) -> None:
        super().__init__(f"Invalid overlay step: {step!r}. Must be between 1 and 12.")
        self.step = step


class UnsupportedFormat(ColorScaleError, ValueError):
    """An unknown output format selector was given."""

    def __init__(self, fmt: object) -> None:
        super().__init__(f"Unsupported format: {fmt!r}")
        self.format = fmt


class InvalidColorInput(ColorScaleError, ValueError):
    """A ColorInput is structurally invalid (missing names or constants)."""


__all__ = [
    "ColorScaleError",
    "InvalidColorFormat",
    "OutOfRangeStep",
    "UnsupportedFormat",
    "InvalidColorInput",
]
