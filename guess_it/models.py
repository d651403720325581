from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from guess_it.config import GameConfig


class Difficulty(Enum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def key(self) -> str:
        # 'easy', 'medium', 'hard' - used to look up settings and files
        return self.name.lower()

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def max_attempts(self) -> int:
        return GameConfig.DIFFICULTY_SETTINGS[self.key]['max_attempts']

    @property
    def score_file(self) -> str:
        return GameConfig.DIFFICULTY_SETTINGS[self.key]['score_file']


class BestScores(BaseModel):
    """
    Best (lowest) winning attempt count for every difficulty.
    A value of 0 means no best score has been recorded yet.
    """
    model_config = ConfigDict(frozen=True)

    easy: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    hard: int = Field(default=0, ge=0)

    def get(self, difficulty: Difficulty) -> int:
        return getattr(self, difficulty.key)

    def with_score(self, difficulty: Difficulty, score: int) -> 'BestScores':
        return self.model_copy(update={difficulty.key: score})


class LeaderboardEntry(BaseModel):
    difficulty: Difficulty
    attempts: int = Field(..., ge=1)

    def render(self) -> str:
        return f"{self.difficulty.label} mode: {self.attempts} attempts"
