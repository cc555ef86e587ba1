import logging
import sys

from guessing_game.game import Game
from guessing_game.utils import InputStreamError, report_error

logger = logging.getLogger("guessing_game.game_loop")


def main(logs=False):
    try:
        Game(logs=logs).run()
    except InputStreamError as e:
        logger.exception(f"main: {e}")
        report_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("main: interrupted")
        sys.exit(130)
    sys.exit(0)


def main_debug():
    main(logs=True)


if __name__ == "__main__":
    main()
