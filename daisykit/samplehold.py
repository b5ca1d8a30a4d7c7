"""Dual sample-and-hold / track-and-hold."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Mode(enum.Enum):
    """Which of the two held values to output."""

    SAMPLE_HOLD = 0
    TRACK_HOLD = 1


@dataclass
class SampleHold:
    """Runs sample-and-hold and track-and-hold in parallel."""

    _track: float = 0.0
    _sample: float = 0.0
    _previous: bool = False

    def process(self, trigger: bool, value: float, mode: Mode = Mode.SAMPLE_HOLD) -> float:
        """Update both holds and return the value selected by ``mode``."""
        if trigger:
            if not self._previous:
                self._sample = value
            self._track = value
        self._previous = trigger
        return self._sample if mode is Mode.SAMPLE_HOLD else self._track