# fps-timecode — https://github.com/paskateknikko/fps-timecode
# Copyright (c) 2025 Tuukka Aimasmäki. MIT License — see LICENSE.
"""Frame count <-> SMPTE-style timecode conversion with drop-frame support.

Example: a 30 fps non-drop sequence starts at 00:01:00:00; its 100th frame
is at

    >>> render(Mode.FPS_30_NDF, parse(Mode.FPS_30_NDF, "00:01:00:00") + 100)
    '00:01:03:10'
"""

from __future__ import annotations

__version__ = "1.0.0"

from .convert import ParseResult, normalize, parse, render, render_duration, try_parse
from .errors import (
    FieldOutOfRange,
    InvalidCount,
    InvalidFormat,
    InvalidMode,
    MissingInput,
    TimecodeError,
)
from .modes import COUNTS, Mode, ModeCounts, counts_for, resolve_mode
from .timecode import Timecode, construct

__all__ = [
    "COUNTS",
    "FieldOutOfRange",
    "InvalidCount",
    "InvalidFormat",
    "InvalidMode",
    "MissingInput",
    "Mode",
    "ModeCounts",
    "ParseResult",
    "Timecode",
    "TimecodeError",
    "construct",
    "counts_for",
    "normalize",
    "parse",
    "render",
    "render_duration",
    "resolve_mode",
    "try_parse",
]
