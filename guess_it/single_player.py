import logging
import random
import time

from guess_it.config import GameConfig
from guess_it.models import Difficulty
from guess_it.stats import RunningStats
from guess_it.utils import Stopwatch, hint_window

logger = logging.getLogger(__name__)


class SinglePlayerEngine:
    """
    One guessing session against a random number.
    Winning with fewer attempts than the stored best updates the best score
    and adds a leaderboard entry.
    """
    def __init__(self, console, store, rng: random.Random, clock=time.monotonic):
        self.console = console
        self.store = store
        self.rng = rng
        self.clock = clock

    def choose_difficulty(self) -> Difficulty:
        choice = self.console.read_int(
            "Select difficulty level (1 = Easy, 2 = Medium, 3 = Hard): ", 1, 3
        )
        return Difficulty(choice)

    def choose_upper_bound(self) -> int:
        answer = self.console.read_line(
            f"Default upper bound is {GameConfig.DEFAULT_UPPER_BOUND}. "
            "Do you want to set a custom upper bound? (y/n): "
        )
        if answer[:1] in ('y', 'Y'):
            return self.console.read_int(
                "Enter the new upper bound (greater than 1): ", GameConfig.MIN_UPPER_BOUND
            )
        return GameConfig.DEFAULT_UPPER_BOUND

    def play(self, stats: RunningStats) -> RunningStats:
        self.console.say("\n--- Single-Player Mode ---")
        difficulty = self.choose_difficulty()
        max_attempts = difficulty.max_attempts
        upper_bound = self.choose_upper_bound()

        target_number = self.rng.randint(1, upper_bound)
        attempts = 0
        logger.info(f"Single-player game: {difficulty.label}, range 1-{upper_bound}")

        best_score = self.store.load(difficulty)
        if best_score == 0:
            self.console.say("No best score yet. Try to beat the default score!")
        else:
            self.console.say(f"Current best score for this difficulty: {best_score} attempts.")

        self.console.say(f"\nGame started! You have {max_attempts} attempts.")
        stopwatch = Stopwatch(self.clock)

        while True:
            guess_value = self.console.read_int("Enter your guess: ")
            attempts += 1

            if attempts == GameConfig.HINT_ATTEMPT:
                low_hint, high_hint = hint_window(target_number, upper_bound)
                self.console.say(f"Hint: The number is between {low_hint} and {high_hint}.")

            if guess_value > target_number:
                self.console.say("Too high!")
            elif guess_value < target_number:
                self.console.say("Too low!")
            else:
                self._announce_win(difficulty, attempts, best_score, stopwatch.elapsed_seconds())
                return stats.record_game(attempts)

            if attempts >= max_attempts:
                self.console.say(
                    f"Sorry, you've exceeded the maximum attempts. The number was {target_number}."
                )
                return stats.record_game(attempts)

    def _announce_win(self, difficulty: Difficulty, attempts: int, best_score: int, time_taken: int) -> None:
        self.console.say("Congratulations! You guessed the correct number.")
        self.console.say(f"Attempts: {attempts}")
        self.console.say(f"Time taken: {time_taken} seconds.")

        if attempts <= GameConfig.MASTER_GUESSER_ATTEMPTS:
            self.console.say("Achievement unlocked: Master Guesser!")

        if best_score == 0 or attempts < best_score:
            self.store.save(difficulty, attempts)
            self.store.append_leaderboard(difficulty, attempts)
            self.console.say("New best score for this difficulty! (Saved)")
        else:
            self.console.say(f"Your best score for this difficulty remains {best_score} attempts.")
