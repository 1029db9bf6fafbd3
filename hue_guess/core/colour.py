"""Colour value type — random generation, hex parsing, accuracy and rendering.

Accuracy is plain channel-wise absolute difference, scaled so that an exact
match scores 100.0 and black vs white scores 0.0:

    100 - (|r1-r2| + |g1-g2| + |b1-b2|) / 765 * 100
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from hue_guess.core.terminal import background_block
from hue_guess.core.types import RandomSource

MAX_CHANNEL = 255
MAX_DIFF = 3.0 * MAX_CHANNEL
HEX_LENGTH = 6


class ColourParseError(ValueError):
    """Text could not be parsed as a #rrggbb colour."""


class InvalidLengthError(ColourParseError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f'input exactly 6: {text}')


class InvalidHexDigitError(ColourParseError):
    def __init__(self, pair: str):
        self.pair = pair
        super().__init__(f'invalid digit found in string: {pair}')


def _parse_channel(pair: str) -> int:
    # int() would also accept '+f', ' f' and non-ASCII digits
    if not (pair.isascii() and pair.isalnum()):
        raise InvalidHexDigitError(pair)
    try:
        return int(pair, 16)
    except ValueError as e:
        raise InvalidHexDigitError(pair) from e


@dataclass(frozen=True)
class Colour:
    """An RGB triple, one byte per channel."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ('red', 'green', 'blue'):
            value = getattr(self, name)
            if not 0 <= value <= MAX_CHANNEL:
                raise ValueError(f'{name} channel out of range 0-255: {value}')

    @classmethod
    def generate_random(cls, rng: RandomSource | None = None) -> Colour:
        """Draw each channel uniformly from [0, 254].

        The upper bound is exclusive, so 255 is never produced. This matches
        the game as first released and is kept on purpose.
        """
        if rng is None:
            rng = np.random.default_rng()
        red = int(rng.integers(0, MAX_CHANNEL))
        green = int(rng.integers(0, MAX_CHANNEL))
        blue = int(rng.integers(0, MAX_CHANNEL))
        return cls(red, green, blue)

    @classmethod
    def parse(cls, text: str) -> Colour:
        """Parse 'rrggbb' or '#rrggbb' (any case). Whitespace is not trimmed.

        Raises InvalidLengthError or InvalidHexDigitError.
        """
        hex_text = text[1:] if text.startswith('#') else text
        if len(hex_text) != HEX_LENGTH:
            raise InvalidLengthError(text)

        red = _parse_channel(hex_text[0:2])
        green = _parse_channel(hex_text[2:4])
        blue = _parse_channel(hex_text[4:6])
        return cls(red, green, blue)

    def to_rgb(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return f'#{self.red:02x}{self.green:02x}{self.blue:02x}'

    def accuracy(self, other: Colour) -> float:
        """Similarity to `other` in [0.0, 100.0]; 100.0 is an exact match."""
        total = (
            abs(self.red - other.red)
            + abs(self.green - other.green)
            + abs(self.blue - other.blue)
        )
        return 100.0 - (total / MAX_DIFF * 100.0)

    def render(self) -> str:
        """A block of spaces painted in this colour, for display only."""
        return background_block(self.to_rgb())

    def __str__(self) -> str:
        return self.render()
