import pytest

from guess_it.console import Console
from guess_it.scores import FileScoreBackend, MemoryScoreBackend, ScoreStore

# The name 'conftest.py' is magic in Pytest.
# Every fixture here is available to all test files without importing it.


class ScriptedConsole(Console):
    """
    A fake terminal: answers prompts from a list of lines and
    remembers everything the game printed.
    Running out of lines behaves like a closed stdin (EOFError).
    """
    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.prompts = []
        self.output = []
        super().__init__(input_function=self._next_line, output_function=self.output.append)

    def _next_line(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("No more scripted input")
        return self.lines.pop(0)

    def feed(self, *lines):
        self.lines.extend(lines)

    @property
    def text(self):
        return "\n".join(self.output)


class FixedRandom:
    # Stands in for random.Random so the secret number is known
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.value


class FakeClock:
    # Returns the given readings in order, then keeps returning the last one
    def __init__(self, *readings):
        self.readings = list(readings) or [0.0]

    def __call__(self):
        if len(self.readings) > 1:
            return self.readings.pop(0)
        return self.readings[0]


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def memory_backend():
    return MemoryScoreBackend()


@pytest.fixture
def memory_store(memory_backend):
    return ScoreStore(memory_backend)


@pytest.fixture
def file_backend(tmp_path):
    return FileScoreBackend(str(tmp_path))


@pytest.fixture
def file_store(file_backend):
    return ScoreStore(file_backend)


@pytest.fixture
def fixed_random():
    # Usage: fixed_random(42) -> an RNG whose randint always returns 42
    return FixedRandom


@pytest.fixture
def fake_clock():
    return FakeClock
