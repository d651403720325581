import logging
import os
from abc import ABC, abstractmethod

from guess_it.config import GameConfig
from guess_it.models import BestScores, Difficulty, LeaderboardEntry

logger = logging.getLogger(__name__)


class ScoreBackend(ABC):
    """Where best scores and the leaderboard log are kept."""

    @abstractmethod
    def read_best_scores(self) -> BestScores: ...

    @abstractmethod
    def write_best_scores(self, best_scores: BestScores) -> None: ...

    @abstractmethod
    def append_leaderboard_line(self, line: str) -> None: ...

    @abstractmethod
    def read_leaderboard_lines(self, limit: int) -> list[str]: ...

    @abstractmethod
    def clear_leaderboard(self) -> None: ...


class MemoryScoreBackend(ScoreBackend):
    def __init__(self, best_scores: BestScores | None = None, leaderboard_lines=None):
        self.best_scores = best_scores or BestScores()
        self.leaderboard_lines = list(leaderboard_lines or [])

    def read_best_scores(self) -> BestScores:
        return self.best_scores

    def write_best_scores(self, best_scores: BestScores) -> None:
        self.best_scores = best_scores

    def append_leaderboard_line(self, line: str) -> None:
        self.leaderboard_lines.append(line)

    def read_leaderboard_lines(self, limit: int) -> list[str]:
        return self.leaderboard_lines[:limit]

    def clear_leaderboard(self) -> None:
        self.leaderboard_lines = []


class FileScoreBackend(ScoreBackend):
    """
    Plain text files in one directory:
    one 'best_score_<difficulty>.txt' per difficulty holding a single integer,
    and 'leaderboard.txt' with one entry per line.
    Failures are logged and treated as "no data"; the player never sees them.
    """
    def __init__(self, directory: str = '.'):
        self.directory = directory

    def _path(self, filename: str) -> str:
        return os.path.join(self.directory, filename)

    @property
    def leaderboard_path(self) -> str:
        return self._path(GameConfig.LEADERBOARD_FILE)

    def _read_score(self, difficulty: Difficulty) -> int:
        path = self._path(difficulty.score_file)
        try:
            with open(path, 'r', encoding='utf-8') as score_file:
                text = score_file.read().split()
        except FileNotFoundError:
            logger.debug(f"No best score file at {path}")
            return 0
        except (OSError, UnicodeDecodeError) as error:
            logger.warning(f"Could not read {path}: {error}")
            return 0

        try:
            score = int(text[0]) if text else 0
        except ValueError:
            logger.warning(f"Ignoring unreadable best score in {path}")
            return 0
        if score < 0:
            logger.warning(f"Ignoring negative best score in {path}")
            return 0
        return score

    def read_best_scores(self) -> BestScores:
        return BestScores(**{
            difficulty.key: self._read_score(difficulty) for difficulty in Difficulty
        })

    def write_best_scores(self, best_scores: BestScores) -> None:
        for difficulty in Difficulty:
            path = self._path(difficulty.score_file)
            try:
                with open(path, 'w', encoding='utf-8') as score_file:
                    score_file.write(str(best_scores.get(difficulty)))
            except OSError as error:
                logger.error(f"Saving best score to {path} failed: {error}")

    def append_leaderboard_line(self, line: str) -> None:
        try:
            with open(self.leaderboard_path, 'a', encoding='utf-8') as leaderboard_file:
                leaderboard_file.write(line + '\n')
        except OSError as error:
            logger.error(f"Appending to {self.leaderboard_path} failed: {error}")

    def read_leaderboard_lines(self, limit: int) -> list[str]:
        lines = []
        try:
            # Undecodable bytes are shown as U+FFFD rather than failing the display
            with open(self.leaderboard_path, 'r', encoding='utf-8', errors='replace') as leaderboard_file:
                for line in leaderboard_file:
                    if len(lines) >= limit:
                        break
                    lines.append(line.rstrip('\n'))
        except FileNotFoundError:
            logger.debug(f"No leaderboard file at {self.leaderboard_path}")
        except OSError as error:
            logger.warning(f"Could not read {self.leaderboard_path}: {error}")
        return lines

    def clear_leaderboard(self) -> None:
        try:
            with open(self.leaderboard_path, 'w', encoding='utf-8'):
                pass
        except OSError as error:
            logger.error(f"Clearing {self.leaderboard_path} failed: {error}")


class ScoreStore:
    def __init__(self, backend: ScoreBackend):
        self.backend = backend

    def load(self, difficulty: Difficulty) -> int:
        return self.backend.read_best_scores().get(difficulty)

    def save(self, difficulty: Difficulty, score: int) -> None:
        best_scores = self.backend.read_best_scores()
        self.backend.write_best_scores(best_scores.with_score(difficulty, score))
        logger.info(f"Best score for {difficulty.label} set to {score}")

    def append_leaderboard(self, difficulty: Difficulty, score: int) -> None:
        entry = LeaderboardEntry(difficulty=difficulty, attempts=score)
        self.backend.append_leaderboard_line(entry.render())

    def leaderboard_lines(self) -> list[str]:
        # First entries in file order - this is NOT sorted by score
        return self.backend.read_leaderboard_lines(GameConfig.LEADERBOARD_DISPLAY_LIMIT)

    def display_leaderboard(self, console) -> None:
        console.say(f"\nLeaderboard (Top {GameConfig.LEADERBOARD_DISPLAY_LIMIT} entries):")
        lines = self.leaderboard_lines()
        if not lines:
            console.say("No leaderboard data available.")
            return
        for line in lines:
            console.say(line)

    def reset(self) -> None:
        self.backend.write_best_scores(BestScores())
        self.backend.clear_leaderboard()
        logger.info("Best scores and leaderboard reset")
