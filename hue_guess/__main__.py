"""hue-guess — guess the hex code of a random colour in your terminal.

Usage: uv run hue-guess

A random colour is shown as a block. Type its hex code (e.g. #3a7bd5 or
3A7BD5) until your guess scores above 90% accuracy. Accuracy is the summed
per-channel difference, scaled to 0-100.

Invalid input is reported and the prompt is shown again. End of input
(Ctrl-D) quits with exit status 1.
"""

import argparse
import sys

from hue_guess.core.colour import Colour
from hue_guess.core.terminal import Terminal
from hue_guess.game import Game


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples of valid guesses:\n'
        '  #ff8800\n'
        '  FF8800\n'
        '  #Ff8800\n'
    )
    return argparse.ArgumentParser(
        prog='hue-guess',
        description='Guess the hex code of a random colour shown in your terminal.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    parser.parse_args(argv)

    game = Game(target=Colour.generate_random(), terminal=Terminal())
    try:
        game.play()
    except (EOFError, OSError) as e:
        print(f'hue-guess: error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
