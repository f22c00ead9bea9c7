# fps-timecode — https://github.com/paskateknikko/fps-timecode
# Copyright (c) 2025 Tuukka Aimasmäki. MIT License — see LICENSE.
#
# Frame count <-> timecode string conversion
#
# String format: HH:MM:SS:FF, two ASCII digits per field.  On input any of
# ':' ';' '.' is accepted as a separator at any position; output always
# uses ':'.
#
# Minutes are weighted as tens-of-minutes * fptm + units-of-minutes * fpm,
# which is what makes the drop-frame tables work.  parse() is a plain
# weighted sum; render() applies the drop-frame correction for addresses.

from __future__ import annotations

from typing import NamedTuple, Optional

from .errors import FieldOutOfRange, InvalidCount, InvalidFormat, TimecodeError
from .modes import Mode, counts_for

SEPARATORS = ":;."
DIGITS = "0123456789"

# Offsets of the separators in "HH:MM:SS:FF"
_SEPARATOR_OFFSETS = (2, 5, 8)
_TIMECODE_LENGTH = 11


class ParseResult(NamedTuple):
    """Outcome of try_parse(): exactly one of count / error is set."""
    count: Optional[int]
    error: Optional[TimecodeError]

    @property
    def ok(self) -> bool:
        return self.error is None


def _split_fields(string: object) -> tuple[int, int, int, int]:
    """Check the fixed-width layout and return (hours, minutes, seconds, frames)."""
    if not isinstance(string, str) or len(string) != _TIMECODE_LENGTH:
        raise InvalidFormat(f"invalid timecode string {string!r}")

    for i, ch in enumerate(string):
        allowed = SEPARATORS if i in _SEPARATOR_OFFSETS else DIGITS
        if ch not in allowed:
            raise InvalidFormat(f"invalid timecode string {string!r}")

    return (int(string[0:2]), int(string[3:5]),
            int(string[6:8]), int(string[9:11]))


def parse(mode: Mode | str, string: str) -> int:
    """Compute the frame count named by a timecode string.

    No drop-frame correction happens here: "00:01:00:00" in fps_30_df
    converts to 1798, which renders back as "00:00:59:28".

    @param mode: Timecode mode.
    @param string: Timecode in the form HH:MM:SS:FF.
    @return: Frame count from "00:00:00:00".
    @raise InvalidMode: Unknown mode.
    @raise InvalidFormat: String is not four separated digit pairs.
    @raise FieldOutOfRange: A field exceeds its bound for the mode.
    """
    counts = counts_for(mode)
    hours, minutes, seconds, frames = _split_fields(string)

    if hours >= 24:
        raise FieldOutOfRange("hours", hours, 24)
    if minutes >= 60:
        raise FieldOutOfRange("minutes", minutes, 60)
    if seconds >= 60:
        raise FieldOutOfRange("seconds", seconds, 60)
    if frames >= counts.fps:
        raise FieldOutOfRange("frames", frames, counts.fps)

    tens_mins, units_mins = divmod(minutes, 10)
    return (hours * counts.fph
            + tens_mins * counts.fptm
            + units_mins * counts.fpm
            + seconds * counts.fps
            + frames)


def try_parse(mode: Mode | str, string: str) -> ParseResult:
    """Like parse(), but report failure in the result instead of raising."""
    try:
        return ParseResult(parse(mode, string), None)
    except TimecodeError as e:
        return ParseResult(None, e)


def normalize(mode: Mode | str, count: int) -> int:
    """Wrap a frame count into [0, fp24h) for the mode.

    @param mode: Timecode mode.
    @param count: Any integer frame count, negative or beyond 24 hours.
    @return: Equivalent count within one day.
    @raise InvalidMode: Unknown mode.
    @raise InvalidCount: `count` is not an integer.
    """
    counts = counts_for(mode)
    # bool is an int subclass but never a frame number
    if not isinstance(count, int) or isinstance(count, bool):
        raise InvalidCount(f"invalid frame count {count!r}")
    return count % counts.fp24h


def render(mode: Mode | str, count: int, as_duration: bool = False) -> str:
    """Produce the HH:MM:SS:FF string for a frame count.

    As an address (the default), drop-frame modes skip the frame numbers
    that do not exist at the start of each non-tenth minute.  As a
    duration the count is broken down positionally with no skipping, so
    1798 frames of fps_30_df is "00:01:00:00".

    @param mode: Timecode mode.
    @param count: Frame count; wrapped into one day first.
    @param as_duration: Render as an elapsed span instead of an address.
    @return: Timecode string with ':' separators.
    """
    counts = counts_for(mode)
    count = normalize(mode, count)

    hours, rem = divmod(count, counts.fph)
    tens_mins, rem = divmod(rem, counts.fptm)
    units_mins, rem = divmod(rem, counts.fpm)

    if as_duration:
        # The last couple of frames in a ten-minute block spill into a
        # tenth "units" minute when broken down positionally.
        if units_mins >= 10:
            tens_mins, units_mins = tens_mins + 1, units_mins - 10
        if tens_mins >= 6:
            hours, tens_mins = hours + 1, tens_mins - 6
    elif counts.drop and units_mins > 0 and rem < counts.drop:
        units_mins -= 1
        rem += counts.fpm

    secs, frms = divmod(rem, counts.fps)
    return "%02d:%02d:%02d:%02d" % (hours, tens_mins * 10 + units_mins, secs, frms)


def render_duration(mode: Mode | str, count: int) -> str:
    """Render a frame count as a duration (see render())."""
    return render(mode, count, as_duration=True)
