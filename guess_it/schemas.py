import re

from pydantic import BaseModel, field_validator, model_validator
from pydantic_core import PydanticCustomError

# A whole line holding one (optionally signed) integer
INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


# This defines what a valid number entry looks like
class NumberEntry(BaseModel):
    value: int
    minimum: int | None = None
    maximum: int | None = None

    # Only whole-line integers are accepted: "12abc" or "1.5" are rejected
    @field_validator('value', mode='before')
    @classmethod
    def parse_whole_line(cls, v):
        if isinstance(v, str):
            text = v.strip()
            try:
                if not INTEGER_PATTERN.match(text):
                    raise ValueError(text)
                # int() also refuses digit strings past the interpreter's length limit
                return int(text)
            except ValueError:
                raise PydanticCustomError(
                    'invalid_number', 'Invalid input. Please enter a valid number.'
                ) from None
        return v

    @model_validator(mode='after')
    def check_range(self):
        too_low = self.minimum is not None and self.value < self.minimum
        too_high = self.maximum is not None and self.value > self.maximum
        if not (too_low or too_high):
            return self

        if self.minimum is not None and self.maximum is not None:
            raise PydanticCustomError(
                'out_of_range',
                'Please enter a number between {minimum} and {maximum}.',
                {'minimum': self.minimum, 'maximum': self.maximum},
            )
        if self.minimum is not None:
            raise PydanticCustomError(
                'out_of_range', 'Please enter a number of at least {minimum}.',
                {'minimum': self.minimum},
            )
        raise PydanticCustomError(
            'out_of_range', 'Please enter a number of at most {maximum}.',
            {'maximum': self.maximum},
        )
