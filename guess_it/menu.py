import logging

from guess_it.stats import RunningStats, display_stats

logger = logging.getLogger(__name__)

MENU_OPTIONS = (
    "1. Single-Player Mode",
    "2. Multiplayer Mode",
    "3. View Leaderboard",
    "4. Reset Best Scores & Leaderboard",
    "5. View Game Statistics",
    "6. Exit",
)
EXIT_CHOICE = len(MENU_OPTIONS)


class MenuController:
    """
    Top-level loop. Owns the running stats for the life of the process;
    resetting scores leaves them untouched.
    """
    def __init__(self, console, store, single_player, multiplayer):
        self.console = console
        self.store = store
        self.single_player = single_player
        self.multiplayer = multiplayer
        self.stats = RunningStats()

    def show_menu(self) -> None:
        self.console.say("\n----- Main Menu -----")
        for option in MENU_OPTIONS:
            self.console.say(option)

    def reset_scores(self) -> None:
        self.store.reset()
        self.console.say("Best scores and leaderboard have been reset!")

    def run(self) -> int:
        while True:
            self.show_menu()
            choice = self.console.read_int(f"Enter your choice (1-{EXIT_CHOICE}): ", 1, EXIT_CHOICE)
            logger.debug(f"Menu choice {choice}")

            if choice == 1:
                self.stats = self.single_player.play(self.stats)
            elif choice == 2:
                self.stats = self.multiplayer.play(self.stats)
            elif choice == 3:
                self.store.display_leaderboard(self.console)
            elif choice == 4:
                self.reset_scores()
            elif choice == 5:
                display_stats(self.console, self.stats)
            else:
                self.console.say("Exiting the game. Goodbye!")
                return 0
