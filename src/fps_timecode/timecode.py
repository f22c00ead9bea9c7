# fps-timecode — https://github.com/paskateknikko/fps-timecode
# Copyright (c) 2025 Tuukka Aimasmäki. MIT License — see LICENSE.
#
# Timecode value type
# An immutable (mode, count, string) triple where the string is always
# the canonical rendering of the count.  Equality and ordering compare
# the strings only, so timecodes from different modes can be equal.

from __future__ import annotations

import functools
import logging
from typing import Optional

from . import convert
from .errors import MissingInput
from .modes import Mode, resolve_mode

logger = logging.getLogger(__name__)


@functools.total_ordering
class Timecode:
    """One timecode address in a given mode.

    Build from either a string or a frame count.  A given count wins over
    a given string; the string is then ignored even if malformed.  A
    string-only timecode is validated, and drop-frame addresses that do
    not exist are moved to the preceding legal address:

        >>> Timecode(Mode.FPS_30_DF, "00:01:00:00").string
        '00:00:59:28'

    @param mode: Timecode mode (Mode member or name).
    @param string: Timecode string HH:MM:SS:FF, used when `count` is None.
    @param count: Frame count from "00:00:00:00"; wrapped into one day.
    @raise MissingInput: Both `string` and `count` are None.
    @raise InvalidMode: Unknown mode.
    """

    __slots__ = ("_mode", "_count", "_string")

    def __init__(self, mode: Mode | str, string: Optional[str] = None,
                 count: Optional[int] = None) -> None:
        if string is None and count is None:
            raise MissingInput("timecode string and frame count both missing")
        mode = resolve_mode(mode)

        if count is not None:
            count = convert.normalize(mode, count)
            canonical = convert.render(mode, count)
        else:
            count = convert.parse(mode, string)
            canonical = convert.render(mode, count)
            if canonical != string:
                logger.debug("%s %r canonicalised to %s", mode, string, canonical)

        object.__setattr__(self, "_mode", mode)
        object.__setattr__(self, "_count", count)
        object.__setattr__(self, "_string", canonical)

    @classmethod
    def from_string_first(cls, mode: Mode | str, string: Optional[str] = None,
                          count: Optional[int] = None) -> Timecode:
        """Build a timecode preferring the string, falling back to the count.

        Older callers relied on this order.  If the string does not parse
        and no count is given, the string's error is raised.
        """
        if string is None and count is None:
            raise MissingInput("timecode string and frame count both missing")
        mode = resolve_mode(mode)

        if string is not None:
            result = convert.try_parse(mode, string)
            if result.ok:
                return cls(mode, count=result.count)
            if count is None:
                raise result.error
            logger.debug("%s string %r rejected (%s), using count %r",
                         mode, string, result.error, count)
        return cls(mode, count=count)

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def count(self) -> int:
        return self._count

    @property
    def string(self) -> str:
        return self._string

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def successor(self) -> Timecode:
        """Return the next address in the sequence, wrapping at 24 hours."""
        return Timecode(self._mode, count=self._count + 1)

    succ = successor

    def as_duration(self) -> str:
        """Render this count as an elapsed span rather than an address."""
        return convert.render_duration(self._mode, self._count)

    def equals(self, other: Timecode) -> bool:
        return self._string == other._string

    def compare(self, other: Timecode) -> int:
        """Return -1, 0 or 1 comparing the strings of self and other."""
        return (self._string > other._string) - (self._string < other._string)

    def __eq__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._string == other._string

    def __lt__(self, other):
        if not isinstance(other, Timecode):
            return NotImplemented
        return self._string < other._string

    def __hash__(self):
        return hash(self._string)

    def __add__(self, frames):
        if not isinstance(frames, int) or isinstance(frames, bool):
            return NotImplemented
        return Timecode(self._mode, count=self._count + frames)

    __radd__ = __add__

    def __sub__(self, frames):
        if not isinstance(frames, int) or isinstance(frames, bool):
            return NotImplemented
        return Timecode(self._mode, count=self._count - frames)

    def __int__(self):
        return self._count

    def __str__(self):
        return self._string

    def __repr__(self):
        return f"Timecode({self._mode.value!r}, {self._string!r})"


def construct(mode: Mode | str, string: Optional[str] = None,
              count: Optional[int] = None) -> Timecode:
    """Build a Timecode; a given count takes precedence over the string."""
    return Timecode(mode, string, count)
