"""The guessing loop.

    ANNOUNCING -> AWAITING_GUESS -> SCORING -> WON
                      ^   |            |
                      +---+------------+

AWAITING_GUESS loops on read failures and unparseable input. SCORING goes
back to AWAITING_GUESS until an attempt beats the threshold. The target
never changes within a game.
"""

from hue_guess.core.colour import Colour, ColourParseError
from hue_guess.core.report import WIN_MESSAGE, format_attempt, format_banner
from hue_guess.core.terminal import Terminal
from hue_guess.core.types import Attempt, GameState

DEFAULT_THRESHOLD = 90.0


class Game:
    """One round of guessing a single target colour."""

    def __init__(self, target: Colour, terminal: Terminal, threshold: float = DEFAULT_THRESHOLD):
        self.target = target
        self.terminal = terminal
        self.threshold = threshold
        self.state = GameState.ANNOUNCING
        self.attempts: list[Attempt] = []

    def announce(self) -> None:
        self.terminal.write_line(format_banner(self.target, self.threshold))
        self.state = GameState.AWAITING_GUESS

    def await_guess(self) -> tuple[str, Colour]:
        """Prompt until the user enters a parseable colour.

        Read errors and parse errors are reported and the prompt is shown
        again. EOFError is not caught.
        """
        self.state = GameState.AWAITING_GUESS
        while True:
            try:
                text = self.terminal.read_line()
            except OSError as e:
                self.terminal.write_line(str(e))
                continue

            # The echoed prompt line is replaced by whatever comes next
            self.terminal.erase_last_line()

            try:
                guess = Colour.parse(text)
            except ColourParseError as e:
                self.terminal.write_line(str(e))
                continue

            return text, guess

    def score(self, text: str, guess: Colour) -> Attempt:
        self.state = GameState.SCORING
        attempt = Attempt(text=text, guess=guess, accuracy=self.target.accuracy(guess))
        self.attempts.append(attempt)
        self.terminal.write_line(format_attempt(attempt))
        return attempt

    def play(self) -> Attempt:
        """Run until an attempt scores above the threshold; return it."""
        self.announce()
        while True:
            text, guess = self.await_guess()
            attempt = self.score(text, guess)
            if attempt.accuracy > self.threshold:
                self.terminal.write_line(WIN_MESSAGE)
                self.state = GameState.WON
                return attempt
