import time


def hint_window(target: int, upper_bound: int) -> tuple[int, int]:
    """Range of +/- 10% of the upper bound around the target, clamped to [1, upper_bound]."""
    spread = upper_bound // 10
    low_hint = max(1, target - spread)
    high_hint = min(upper_bound, target + spread)
    return low_hint, high_hint


class Stopwatch:
    # Measures whole seconds elapsed since it was created
    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._started_at = clock()

    def elapsed_seconds(self) -> int:
        return int(self._clock() - self._started_at)
