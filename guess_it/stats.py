from pydantic import BaseModel, ConfigDict, Field


class RunningStats(BaseModel):
    """
    Totals for the current process only. Owned by the menu and handed to each
    game, which returns an updated copy when the session ends.
    """
    model_config = ConfigDict(frozen=True)

    total_games_played: int = Field(default=0, ge=0)
    total_attempts_made: int = Field(default=0, ge=0)

    def record_game(self, attempts: int) -> 'RunningStats':
        return self.model_copy(update={
            'total_games_played': self.total_games_played + 1,
            'total_attempts_made': self.total_attempts_made + attempts,
        })

    @property
    def average_attempts(self) -> float | None:
        if self.total_games_played == 0:
            return None
        return self.total_attempts_made / self.total_games_played


def display_stats(console, stats: RunningStats) -> None:
    if stats.average_attempts is None:
        console.say("\nNo games played yet.")
        return
    console.say("\n--- Game Statistics ---")
    console.say(f"Total games played: {stats.total_games_played}")
    console.say(f"Total attempts made: {stats.total_attempts_made}")
    console.say(f"Average attempts per game: {stats.average_attempts}")
