"""Terminal helpers — line input, ANSI colour blocks and line erasing.

Everything that writes terminal control sequences lives here so the colour
and game logic can be exercised against plain StringIO streams.

Sequences used:
  ESC[48;2;R;G;Bm  set 24-bit background colour
  ESC[0m           reset attributes
  ESC[F            move cursor to the start of the previous line
  ESC[2K           clear the entire line
"""

import sys
from typing import TextIO

RESET = '\x1b[0m'
CURSOR_PREV_LINE = '\x1b[F'
CLEAR_LINE = '\x1b[2K'

BLOCK_WIDTH = 20
DEFAULT_PROMPT = 'type color:'


def background_block(rgb: tuple[int, int, int], width: int = BLOCK_WIDTH) -> str:
    """Return `width` spaces painted with a 24-bit background colour."""
    r, g, b = rgb
    return f'\x1b[48;2;{r};{g};{b}m{" " * width}{RESET}'


class Terminal:
    """Line-oriented prompt/response over a pair of text streams.

    `ansi` decides whether cursor control sequences are written. When left
    as None it follows stdout.isatty(), so redirected output stays clean.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        ansi: bool | None = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        if ansi is None:
            isatty = getattr(self.stdout, 'isatty', None)
            ansi = bool(isatty and isatty())
        self.ansi = ansi

    def write_line(self, text: str = '') -> None:
        self.stdout.write(text + '\n')
        self.stdout.flush()

    def read_line(self, prompt: str = DEFAULT_PROMPT) -> str:
        """Show `prompt`, block for one line and return it trimmed.

        Raises OSError if the read fails and EOFError at end of input.
        """
        self.stdout.write(prompt)
        self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            raise EOFError('end of input while waiting for a guess')
        return line.rstrip('\r\n').strip()

    def erase_last_line(self) -> None:
        """Move up one line and clear it. No-op without ANSI support."""
        if not self.ansi:
            return
        self.stdout.write(CURSOR_PREV_LINE + CLEAR_LINE)
        self.stdout.flush()
