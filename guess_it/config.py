import logging
import os


class GameConfig:
    # Rules and persistence file for each difficulty level
    DIFFICULTY_SETTINGS = {
        'easy':   {'max_attempts': 15, 'score_file': 'best_score_easy.txt'},
        'medium': {'max_attempts': 10, 'score_file': 'best_score_medium.txt'},
        'hard':   {'max_attempts': 5,  'score_file': 'best_score_hard.txt'},
    }

    DEFAULT_UPPER_BOUND = 100
    MIN_UPPER_BOUND = 2

    # The range hint is shown on this attempt only
    HINT_ATTEMPT = 3
    # Winning in this many attempts (or fewer) unlocks "Master Guesser"
    MASTER_GUESSER_ATTEMPTS = 3

    # Shared budget for both players, not configurable
    MULTIPLAYER_UPPER_BOUND = 100
    MULTIPLAYER_MAX_ATTEMPTS = 10

    LEADERBOARD_FILE = 'leaderboard.txt'
    LEADERBOARD_DISPLAY_LIMIT = 5

    @staticmethod
    def data_directory() -> str:
        # Where the score files live. Defaults to the working directory.
        return os.environ.get('GUESS_IT_DATA_DIR', '.')

    @staticmethod
    def log_level() -> str:
        level = os.environ.get('GUESS_IT_LOG_LEVEL', 'WARNING').upper()
        # Unknown names come back as "Level <name>" instead of a number
        if not isinstance(logging.getLevelName(level), int):
            return 'WARNING'
        return level
