import logging

from pydantic import ValidationError

from guess_it.schemas import NumberEntry

logger = logging.getLogger(__name__)


class Console:
    """
    Blocking terminal I/O for the game.
    Every prompt loops until it gets valid input, so callers never see bad input.
    """
    def __init__(self, input_function=input, output_function=print):
        self._input = input_function
        self._output = output_function

    def say(self, message: str = '') -> None:
        self._output(message)

    def read_line(self, prompt: str) -> str:
        # Raw line, nothing trimmed. Empty answers are allowed.
        return self._input(prompt)

    def read_int(self, prompt: str, minimum: int | None = None, maximum: int | None = None) -> int:
        while True:
            raw_line = self.read_line(prompt)
            try:
                entry = NumberEntry(value=raw_line, minimum=minimum, maximum=maximum)
            except ValidationError as error:
                logger.debug(f"Rejected input {raw_line!r}: {error.errors()[0]['type']}")
                self.say(error.errors()[0]['msg'])
                continue
            return entry.value
