import logging
import random
import time

from dotenv import load_dotenv

from guess_it.config import GameConfig
from guess_it.console import Console
from guess_it.menu import MenuController
from guess_it.multiplayer import MultiplayerEngine
from guess_it.scores import FileScoreBackend, ScoreStore
from guess_it.single_player import SinglePlayerEngine

logger = logging.getLogger(__name__)


def create_game(console: Console | None = None) -> MenuController:
    # Load optional settings (data directory, log level) from the .env file
    load_dotenv()

    # Logs go to stderr so they never mix with the game text on stdout
    logging.basicConfig(
        level=GameConfig.log_level(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    console = console or Console()
    data_directory = GameConfig.data_directory()
    store = ScoreStore(FileScoreBackend(data_directory))
    logger.info(f"Score files stored in {data_directory}")

    # Seeded once from the wall clock; not reproducible across runs
    rng = random.Random(time.time())

    return MenuController(
        console=console,
        store=store,
        single_player=SinglePlayerEngine(console, store, rng),
        multiplayer=MultiplayerEngine(console, rng),
    )


def main() -> int:
    game = create_game()
    try:
        return game.run()
    except (EOFError, KeyboardInterrupt) as error:
        logger.info(f"Input closed ({type(error).__name__}), leaving the game")
        game.console.say("\nExiting the game. Goodbye!")
        return 0
