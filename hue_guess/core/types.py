"""Shared types for hue-guess: GameState, Attempt, RandomSource."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from hue_guess.core.colour import Colour


class RandomSource(Protocol):
    """Anything that can draw an integer from [low, high).

    numpy.random.Generator satisfies this; tests pass a seeded generator
    or a stub.
    """

    def integers(self, low: int, high: int) -> int: ...


class GameState(enum.Enum):
    """Where the game loop currently is."""

    ANNOUNCING = 'announcing'
    AWAITING_GUESS = 'awaiting_guess'
    SCORING = 'scoring'
    WON = 'won'


@dataclass(frozen=True)
class Attempt:
    """One scored guess against the target colour."""

    text: str  # trimmed input as typed
    guess: Colour
    accuracy: float  # 0.0 - 100.0
