# fps-timecode — https://github.com/paskateknikko/fps-timecode
# Copyright (c) 2025 Tuukka Aimasmäki. MIT License — see LICENSE.
#
# Exceptions raised by the timecode engine.
# Every failure is a caller-input error; nothing here is retried.

from __future__ import annotations


class TimecodeError(ValueError):
    """Base class for all timecode errors."""


class InvalidMode(TimecodeError):
    """Mode is not one of the eight known modes."""


class InvalidFormat(TimecodeError):
    """Timecode string is not of the form DD:DD:DD:DD."""


class FieldOutOfRange(TimecodeError):
    """A timecode field exceeds its bound for the mode.

    @param field: Field name ("hours", "minutes", "seconds" or "frames").
    @param value: Parsed field value.
    @param limit: Exclusive upper bound for the field.
    """

    def __init__(self, field: str, value: int, limit: int) -> None:
        super().__init__(f"{field} {value:02d} out of range (must be < {limit})")
        self.field = field
        self.value = value
        self.limit = limit


class InvalidCount(TimecodeError, TypeError):
    """Frame count is not an integer."""


class MissingInput(TimecodeError):
    """Neither a timecode string nor a frame count was given."""
