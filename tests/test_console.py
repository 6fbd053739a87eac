import io
import random

import pytest

from tarnished.console import (
    Console,
    has_char_match,
    normalize_name,
    random_between,
)
from tarnished.constants import PLAYER_NAME_LENGTH


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_random_between_stays_in_bounds():
    random.seed(7)
    values = {random_between(5, 1) for _ in range(500)}
    assert values == {1, 2, 3, 4, 5}


def test_random_between_single_value():
    assert random_between(4, 4) == 4


def test_random_between_reversed_bounds():
    with pytest.raises(ValueError):
        random_between(1, 5)


def test_has_char_match():
    assert has_char_match("w", "wasde")
    assert not has_char_match("q", "wasde")
    assert has_char_match("d", ["w", "d"])


def test_normalize_strips_leading_spaces():
    assert normalize_name("   Ranni") == ("Ranni", False)


def test_normalize_long_name_is_cut():
    name, too_long = normalize_name("z" * (PLAYER_NAME_LENGTH + 5))
    assert too_long
    assert name == "z" * PLAYER_NAME_LENGTH


def test_normalize_trailing_spaces_past_limit_not_counted():
    name, too_long = normalize_name("a" * PLAYER_NAME_LENGTH + "   ")
    assert not too_long
    assert name == "a" * PLAYER_NAME_LENGTH


def test_read_int_parses():
    console, _ = _console("3\n")
    assert console.read_int(1, 0, 5) == 3


def test_read_int_invalid_current_shows_notice():
    console, out = _console("2\n")
    console.read_int(99, 0, 5)
    assert "INVALID INPUT" in out.getvalue()
    assert "ENTER THE NUMBER OF YOUR SELECTION" in out.getvalue()


def test_read_int_valid_current_no_notice():
    console, out = _console("2\n")
    console.read_int(1, 0, 5)
    assert "INVALID INPUT" not in out.getvalue()
    assert "[INPUT]: " in out.getvalue()


def test_read_int_non_numeric_keeps_current():
    console, _ = _console("abc\n")
    assert console.read_int(4, 0, 5) == 4


def test_read_int_leading_digits():
    console, _ = _console("12abc\n")
    assert console.read_int(0, 0, 5) == 12


def test_read_int_eof():
    console, _ = _console("")
    with pytest.raises(EOFError):
        console.read_int(0, 0, 5)


def test_read_string_returns_line():
    console, out = _console("hello world\nnext\n")
    assert console.read_string("TAG") == "hello world"
    assert "[TAG]: " in out.getvalue()


def test_read_name_short():
    console, out = _console("  Blaidd\n")
    assert console.read_name() == "Blaidd"
    assert "TOO LONG" not in out.getvalue()


def test_read_name_too_long_waits_for_enter():
    long_name = "m" * (PLAYER_NAME_LENGTH + 3)
    console, out = _console(long_name + "\n\nafter\n")
    assert console.read_name() == "m" * PLAYER_NAME_LENGTH
    assert "YOUR CHOSEN NAME IS TOO LONG" in out.getvalue()
    assert console.read_string("X") == "after"


def test_press_enter_consumes_one_line():
    console, out = _console("ignored\nkept\n")
    console.press_enter()
    assert console.read_string("X") == "kept"
    assert "PRESS ENTER TO CONTINUE..." in out.getvalue()


def test_read_char_first_character():
    console, out = _console("wxyz\n")
    assert console.read_char("w", "wasd") == "w"
    assert "INVALID INPUT" not in out.getvalue()


def test_read_char_invalid_current_shows_notice():
    console, out = _console("a\n")
    assert console.read_char("q", "wasd") == "a"
    assert "ENTER THE CHARACTER OF YOUR SELECTION" in out.getvalue()


def test_read_char_empty_line():
    console, _ = _console("\n")
    assert console.read_char("w", "wasd") == "\n"