"""Probabilistic trigger."""

from __future__ import annotations

import random


class Maytrig:
    """Returns True with a given probability."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def process(self, prob: float) -> bool:
        """True with probability ``prob`` (1 always, below 0 never)."""
        return self._rng.random() <= prob