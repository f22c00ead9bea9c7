# fps-timecode — https://github.com/paskateknikko/fps-timecode
# Copyright (c) 2025 Tuukka Aimasmäki. MIT License — see LICENSE.
#
# Timecode mode table
# Frame-rate / dropness modes and their precomputed radix constants.
#
# fp24h : frames per 24 hours      fph : frames per hour
# fptm  : frames per ten minutes   fpm : frames per minute
# fps   : frames per second        drop: frame numbers skipped per minute
#
# Drop-frame minutes skip their first `drop` frame numbers, except every
# tenth minute, so fpm is fps*60 - drop while fptm is fps*600 - 9*drop.

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import NamedTuple

from .errors import InvalidMode


class Mode(str, enum.Enum):
    """Timecode mode: frame rate plus dropness."""

    FPS_24 = "fps_24"
    FPS_25 = "fps_25"
    FPS_30_DF = "fps_30_df"
    FPS_30_NDF = "fps_30_ndf"
    FPS_48 = "fps_48"
    FPS_50 = "fps_50"
    FPS_60_DF = "fps_60_df"
    FPS_60_NDF = "fps_60_ndf"

    def __str__(self) -> str:
        return self.value

    @property
    def counts(self) -> ModeCounts:
        return COUNTS[self]

    @property
    def is_drop_frame(self) -> bool:
        return COUNTS[self].drop > 0


class ModeCounts(NamedTuple):
    fp24h: int
    fph: int
    fptm: int
    fpm: int
    fps: int
    drop: int


COUNTS = MappingProxyType({
    Mode.FPS_24:     ModeCounts(fp24h=2073600, fph=86400,  fptm=14400, fpm=1440, fps=24, drop=0),
    Mode.FPS_25:     ModeCounts(fp24h=2160000, fph=90000,  fptm=15000, fpm=1500, fps=25, drop=0),
    Mode.FPS_30_DF:  ModeCounts(fp24h=2589408, fph=107892, fptm=17982, fpm=1798, fps=30, drop=2),
    Mode.FPS_30_NDF: ModeCounts(fp24h=2592000, fph=108000, fptm=18000, fpm=1800, fps=30, drop=0),
    Mode.FPS_48:     ModeCounts(fp24h=4147200, fph=172800, fptm=28800, fpm=2880, fps=48, drop=0),
    Mode.FPS_50:     ModeCounts(fp24h=4320000, fph=180000, fptm=30000, fpm=3000, fps=50, drop=0),
    Mode.FPS_60_DF:  ModeCounts(fp24h=5178816, fph=215784, fptm=35964, fpm=3596, fps=60, drop=4),
    Mode.FPS_60_NDF: ModeCounts(fp24h=5184000, fph=216000, fptm=36000, fpm=3600, fps=60, drop=0),
})


def resolve_mode(mode: Mode | str | None) -> Mode:
    """Return the Mode member named by `mode`.

    @param mode: A Mode member or its name, e.g. "fps_30_df".
    @return: The matching Mode.
    @raise InvalidMode: If `mode` is absent or unknown.
    """
    if isinstance(mode, Mode):
        return mode
    if not isinstance(mode, str):
        raise InvalidMode(f"invalid timecode mode {mode!r}")
    try:
        return Mode(mode)
    except ValueError:
        raise InvalidMode(f"invalid timecode mode {mode!r}") from None


def counts_for(mode: Mode | str | None) -> ModeCounts:
    """Return the constants for `mode`, raising InvalidMode if unknown."""
    return COUNTS[resolve_mode(mode)]
