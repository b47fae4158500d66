"""Uniform piece randomizer"""
import logging
import random

log = logging.getLogger(__name__)

class PieceRandom:
    PIECES = ["I","O","T","S","Z","J","L"]
    def __init__(self, seed=None):
        self._rng = random.Random(seed)
        if seed is not None:
            log.debug("piece randomizer seeded with %r", seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
