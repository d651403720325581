import logging
import random
import time

from guess_it.config import GameConfig
from guess_it.stats import RunningStats
from guess_it.utils import Stopwatch

logger = logging.getLogger(__name__)


class MultiplayerEngine:
    # Two players take turns against one shared number and one shared attempt budget.
    # Nothing here touches best scores or the leaderboard.
    def __init__(self, console, rng: random.Random, clock=time.monotonic):
        self.console = console
        self.rng = rng
        self.clock = clock

    def play(self, stats: RunningStats) -> RunningStats:
        self.console.say("\n--- Multiplayer Mode ---")
        players = (
            self.console.read_line("Enter name for Player 1: "),
            self.console.read_line("Enter name for Player 2: "),
        )

        upper_bound = GameConfig.MULTIPLAYER_UPPER_BOUND
        self.console.say(f"Playing with an upper bound of {upper_bound}.")
        target_number = self.rng.randint(1, upper_bound)
        max_attempts = GameConfig.MULTIPLAYER_MAX_ATTEMPTS

        attempts = 0
        stopwatch = Stopwatch(self.clock)

        while attempts < max_attempts:
            current_player = players[attempts % 2]
            self.console.say(f"\n{current_player}'s turn.")
            guess_value = self.console.read_int("Enter your guess: ")
            attempts += 1

            if guess_value > target_number:
                self.console.say("Too high!")
            elif guess_value < target_number:
                self.console.say("Too low!")
            else:
                self.console.say(f"Congratulations, {current_player}! You guessed the correct number.")
                self.console.say(f"Total attempts: {attempts}")
                self.console.say(f"Time taken: {stopwatch.elapsed_seconds()} seconds.")
                logger.info(f"Multiplayer game won after {attempts} attempts")
                return stats.record_game(attempts)

        self.console.say(f"\nMaximum attempts reached. The correct number was {target_number}.")
        return stats.record_game(attempts)
