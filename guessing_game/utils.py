import sys


class InputStreamError(Exception):
    """Raised when no further guesses can be read from the input stream."""


def render_text(text):
    """Write one line of game output."""
    print(text, flush=True)


def prompt_user_input(text=""):
    try:
        return input(text)
    except EOFError as e:
        raise InputStreamError("input stream closed before the game was won") from e
    except (OSError, RuntimeError, ValueError) as e:
        # RuntimeError: sys.stdin is gone, ValueError: stdin was closed
        raise InputStreamError(f"could not read from input stream: {e}") from e


def report_error(text):
    print(f"guessing_game: {text}", file=sys.stderr)
