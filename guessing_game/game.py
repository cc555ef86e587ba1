import logging
import sys
from logging.handlers import RotatingFileHandler

from guessing_game.data_types import GameState, Outcome, compare, parse_guess
from guessing_game.random_source import RandomSource
from guessing_game.utils import prompt_user_input, render_text

logger = logging.getLogger("guessing_game.game")

SECRET_MIN = 1
SECRET_MAX = 100
BANNER = f"Guess the number ({SECRET_MIN}-{SECRET_MAX})!"
LOG_FILE = "/tmp/guessing_game.log"


class Game:
    def __init__(self, random_source=None, logs=False):
        setup_logger(logs=logs)
        self.random_source = random_source or RandomSource()
        self._secret = self.random_source.randint(SECRET_MIN, SECRET_MAX)
        self.state = GameState.AWAITING_GUESS
        self.guess = None
        self.guess_count = 0
        logger.debug("Game.__init__ - secret drawn")

    @property
    def secret(self):
        return self._secret

    def prompt(self):
        line = prompt_user_input()
        self.guess = parse_guess(line)
        if self.guess is None:
            logger.debug(f"Game.prompt - discarding unparseable input {line!r}")

    def respond(self):
        outcome = compare(self.guess, self._secret)
        logger.debug(f"Game.respond - {self.guess=}, {outcome=}")
        render_text(outcome.value)
        if outcome is Outcome.EQUAL:
            self.state = GameState.WON
        return outcome

    def run(self):
        render_text(BANNER)
        while self.state is GameState.AWAITING_GUESS:
            self.prompt()
            if self.guess is None:
                continue
            self.guess_count += 1
            self.respond()
        logger.info(f"Game won after {self.guess_count} guesses, {self._secret=}")
        return self.guess_count


def setup_logger(logs=False):
    logger = logging.getLogger("guessing_game")
    logger.setLevel(logging.DEBUG)
    # handlers are process-wide, each kind is installed once
    new_session = not any(
        isinstance(h, RotatingFileHandler) for h in logger.handlers
    )
    if new_session:
        handler = RotatingFileHandler(
            LOG_FILE,
            mode="a",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding=None,
            delay=0,
        )
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if logs and console_handler(logger) is None:
        # stdout belongs to the game, echo logs on stderr
        handler = logging.StreamHandler(sys.stderr)
        console_formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(console_formatter)
        logger.addHandler(handler)

    if new_session:
        logger.info("**************** NEW SESSION STARTED ****************")

    return logger


def console_handler(logger):
    for handler in logger.handlers:
        # RotatingFileHandler is a StreamHandler too
        if type(handler) is logging.StreamHandler:
            return handler
    return None
