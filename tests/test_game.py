"""Tests for hue_guess.game — the prompt/score loop against in-memory streams."""

import io

import pytest
from hue_guess.core.colour import Colour
from hue_guess.core.report import format_attempt, format_banner
from hue_guess.core.terminal import CLEAR_LINE, CURSOR_PREV_LINE, Terminal
from hue_guess.core.types import Attempt, GameState
from hue_guess.game import Game

BLACK = Colour(0, 0, 0)
ERASE = CURSOR_PREV_LINE + CLEAR_LINE


def _game(lines: str, target: Colour = BLACK, threshold: float = 90.0) -> tuple[Game, io.StringIO]:
    out = io.StringIO()
    term = Terminal(stdin=io.StringIO(lines), stdout=out, ansi=True)
    return Game(target=target, terminal=term, threshold=threshold), out


class FlakyStdin:
    """Fails the first read, then serves lines from a buffer."""

    def __init__(self, text: str):
        self.buffer = io.StringIO(text)
        self.failed = False

    def readline(self) -> str:
        if not self.failed:
            self.failed = True
            raise OSError('stream temporarily unavailable')
        return self.buffer.readline()


class TestWin:
    def test_exact_match(self) -> None:
        game, out = _game('#000000\n')
        attempt = game.play()
        text = out.getvalue()
        assert attempt.accuracy == 100.0
        assert '100.00% | #000000 ' in text
        assert text.rstrip('\n').endswith('You did it!')
        assert game.state is GameState.WON

    def test_close_enough(self) -> None:
        # 10+10+10 of 765 -> 96.08%
        game, out = _game('0a0a0a\n')
        attempt = game.play()
        assert attempt.accuracy == pytest.approx(96.078, abs=1e-3)
        assert '96.08% | 0a0a0a ' in out.getvalue()

    def test_threshold_is_strict(self) -> None:
        # a perfect 100% does not beat a 100% threshold
        game, out = _game('#000000\n#000000\n', threshold=100.0)
        with pytest.raises(EOFError):
            game.play()
        assert len(game.attempts) == 2
        assert 'You did it!' not in out.getvalue()


class TestMiss:
    def test_miss_reprompts(self) -> None:
        game, out = _game('#ffffff\n')
        with pytest.raises(EOFError):
            game.play()
        text = out.getvalue()
        assert '0.00% | #ffffff ' in text
        assert 'You did it!' not in text
        assert text.count('type color:') == 2

    def test_miss_then_win(self) -> None:
        game, out = _game('#ffffff\n#010101\n')
        attempt = game.play()
        assert [a.text for a in game.attempts] == ['#ffffff', '#010101']
        assert attempt.guess == Colour(1, 1, 1)
        assert game.target == BLACK


class TestInvalidInput:
    def test_parse_error_retracts_prompt(self) -> None:
        game, out = _game('zzzzzz\n#000000\n')
        game.play()
        text = out.getvalue()
        assert 'type color:' + ERASE + 'invalid digit found in string: zz\n' in text
        assert text.count('type color:') == 2
        assert len(game.attempts) == 1
        assert game.target == BLACK

    def test_length_error_shown(self) -> None:
        game, out = _game('#12\n#000000\n')
        game.play()
        assert 'input exactly 6: #12\n' in out.getvalue()

    def test_input_is_trimmed(self) -> None:
        game, out = _game('   #000000   \n')
        game.play()
        assert '100.00% | #000000 ' in out.getvalue()

    def test_read_error_reprompts(self) -> None:
        out = io.StringIO()
        term = Terminal(stdin=FlakyStdin('#000000\n'), stdout=out, ansi=True)
        game = Game(target=BLACK, terminal=term)
        game.play()
        text = out.getvalue()
        assert 'stream temporarily unavailable\n' in text
        assert text.count('type color:') == 2

    def test_eof_propagates(self) -> None:
        game, _out = _game('')
        with pytest.raises(EOFError):
            game.play()
        assert game.state is GameState.AWAITING_GUESS


class TestNoAnsi:
    def test_no_cursor_sequences(self) -> None:
        out = io.StringIO()
        term = Terminal(stdin=io.StringIO('zz\n#000000\n'), stdout=out, ansi=False)
        Game(target=BLACK, terminal=term).play()
        assert CURSOR_PREV_LINE not in out.getvalue()


class TestReport:
    def test_banner(self) -> None:
        lines = format_banner(BLACK, 90.0).split('\n')
        assert lines[0] == 'Guess this color:'
        assert lines[1] == ' ' + '-' * 22 + ' '
        assert lines[2] == f'| {BLACK.render()} |'
        assert lines[3] == lines[1]
        assert lines[4] == 'Aim for an accuracy above 90%!'
        assert lines[5] == ''

    def test_attempt_line(self) -> None:
        guess = Colour(255, 255, 255)
        line = format_attempt(Attempt(text='#FFFFFF', guess=guess, accuracy=0.0))
        assert line == f'0.00% | #FFFFFF {guess.render()}'

    def test_banner_printed_first(self) -> None:
        game, out = _game('#000000\n')
        game.play()
        assert out.getvalue().startswith(format_banner(BLACK, 90.0) + '\n')
