"""Binary symmetric channel."""

from __future__ import annotations

import random

from .bitset import BitSet


class Channel:
    """Flips each bit of a message independently with probability ``prob``."""

    def __init__(self, prob: float, rng: random.Random | None = None) -> None:
        self.prob = prob
        self.rng = rng if rng is not None else random.Random()

    def add_noise(self, msg: BitSet) -> BitSet:
        """Return a noisy copy of msg; the first draw decides the highest bit."""
        noise = 0
        for _ in range(len(msg)):
            noise = (noise << 1) | (self.rng.random() <= self.prob)
        return msg ^ BitSet(len(msg), noise)