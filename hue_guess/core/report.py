"""Text output for hue-guess: banner, attempt lines and win message."""

from hue_guess.core.colour import Colour
from hue_guess.core.terminal import BLOCK_WIDTH
from hue_guess.core.types import Attempt

WIN_MESSAGE = 'You did it!'


def format_banner(target: Colour, threshold: float) -> str:
    """Format the opening screen with the target block inside a border."""
    border = ' ' + '-' * (BLOCK_WIDTH + 2) + ' '
    lines = [
        'Guess this color:',
        border,
        f'| {target.render()} |',
        border,
        f'Aim for an accuracy above {threshold:g}%!',
        '',
    ]
    return '\n'.join(lines)


def format_attempt(attempt: Attempt) -> str:
    """Format one scored guess: accuracy, raw input and the guessed colour."""
    return f'{attempt.accuracy:.2f}% | {attempt.text} {attempt.guess.render()}'
