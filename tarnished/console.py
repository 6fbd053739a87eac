"""Terminal input helpers and the random number helper."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from .constants import PLAYER_NAME_LENGTH
from .printer import SYSTEM_MESSAGE, input_tag, invalid_input_message, message

STD_INPUT_TAG = "INPUT"
NAME_INPUT_TAG = "INPUT YOUR CHOSEN NAME"
PRESS_ENTER = "PRESS ENTER TO CONTINUE..."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def random_between(upper: int, lower: int) -> int:
    """Return a random integer from lower to upper, both included."""
    if upper < lower:
        raise ValueError(f"upper bound {upper} is below lower bound {lower}")
    return random.randint(lower, upper)


def has_char_match(key: str, valid: Iterable[str]) -> bool:
    """Tell whether key is one of the valid characters."""
    return key in set(valid)


def normalize_name(raw: str) -> tuple[str, bool]:
    """Strip leading spaces and cut to the name limit.

    Returns the name and whether the entry counted as too long; spaces past
    the limit do not count towards the length.
    """
    start = len(raw) - len(raw.lstrip(" "))
    length = len(raw) - start - raw[PLAYER_NAME_LENGTH:].count(" ")
    return raw[start : start + PLAYER_NAME_LENGTH], length > PLAYER_NAME_LENGTH


class Console:
    """Reads player input and writes screen text."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text to the screen."""
        self._out.write(text)
        self._out.flush()

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError("input closed")
        return line[:-1] if line.endswith("\n") else line

    def press_enter(self) -> None:
        """Ask for enter and wait for a line."""
        self.write(message(SYSTEM_MESSAGE, PRESS_ENTER))
        self._read_line()

    def read_int(self, current: int, minimum: int, maximum: int) -> int:
        """Read a number; the previous value is kept if nothing numeric is entered.

        A notice is shown first when the previous value lies outside the range.
        """
        if current < minimum or current > maximum:
            self.write(invalid_input_message("ENTER THE NUMBER OF YOUR SELECTION"))
        self.write(input_tag(STD_INPUT_TAG))
        match = _LEADING_INT.match(self._read_line())
        return int(match.group(1)) if match else current

    def read_string(self, tag: str) -> str:
        """Read a whole line after showing an input tag."""
        self.write("\n" + input_tag(tag))
        return self._read_line()

    def read_name(self) -> str:
        """Read a player name, warning when it had to be shortened."""
        name, too_long = normalize_name(self.read_string(NAME_INPUT_TAG))
        if too_long:
            self.write(message(SYSTEM_MESSAGE, "YOUR CHOSEN NAME IS TOO LONG"))
            self.press_enter()
        return name

    def read_char(self, current: str, valid: Iterable[str]) -> str:
        """Read one character; a notice is shown first if current is not valid."""
        if not has_char_match(current, valid):
            self.write(invalid_input_message("ENTER THE CHARACTER OF YOUR SELECTION"))
        self.write(input_tag(STD_INPUT_TAG))
        line = self._read_line()
        return line[0] if line else "\n"