"""Span and trace identifier generation.

Identifiers are 16 lowercase hex characters derived from a uniformly random
64-bit value. They are meant for correlating events, not for security: the
generator is a plain `random.Random`, seeded once.
"""

from __future__ import annotations

import random
from typing import Protocol


class IdGenerator(Protocol):
    """Anything callable that returns a fresh identifier string."""

    def __call__(self) -> str:
        ...


class RandomIdGenerator:
    """Identifier generator backed by its own seeded `random.Random`.

    Args:
        seed: Optional seed. `None` seeds from OS entropy; a fixed value gives a
            reproducible sequence (useful in tests).
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def __call__(self) -> str:
        return f'{self._rng.getrandbits(64):016x}'


_default_generator = RandomIdGenerator()


def generate_id() -> str:
    """Return a new 16-char hex identifier from the process-wide generator."""
    return _default_generator()
