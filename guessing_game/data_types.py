import re
from enum import Enum
from typing import Optional

# guesses are read as unsigned 32-bit integers
GUESS_MAX = 2**32 - 1

GUESS_PATTERN = re.compile(r"\+?[0-9]+")


class Outcome(Enum):
    LOW = "Too low!"
    HIGH = "Too high!"
    EQUAL = "You win!"


class GameState(Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"


def parse_guess(text: str) -> Optional[int]:
    """
    Parse one line of player input into a guess.

    Surrounding whitespace (line terminator included) is ignored. Returns None
    for anything that is not a non-negative integer in the guess range.
    """
    text = text.strip()
    if not GUESS_PATTERN.fullmatch(text):
        return None
    guess = int(text)
    if guess > GUESS_MAX:
        return None
    return guess


def compare(guess: int, secret: int) -> Outcome:
    if guess < secret:
        return Outcome.LOW
    elif guess > secret:
        return Outcome.HIGH
    return Outcome.EQUAL
