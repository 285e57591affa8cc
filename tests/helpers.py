"""
Test doubles for the game's external collaborators.
"""

import random
from typing import Iterable, List, Optional, Union


class ScriptedIO:
    """
    Plays the ruler from a fixed list of answers and records all output.

    Integers feed read_integer(); strings that are not numbers make
    read_integer() raise ValueError, the way a typo would.
    """

    def __init__(self, answers: Iterable[Union[int, str]] = ()):
        self.answers: List[Union[int, str]] = list(answers)
        self.outputs: List[str] = []

    def _next(self) -> Union[int, str]:
        if not self.answers:
            raise EOFError("ScriptedIO ran out of answers")
        return self.answers.pop(0)

    def show(self, text: str) -> None:
        self.outputs.append(text)

    def read_integer(self) -> int:
        return int(self._next())

    def read_answer(self) -> str:
        return str(self._next())

    @property
    def text(self) -> str:
        return "\n".join(self.outputs)


class StubRandom(random.Random):
    """
    Random source returning queued values, so every roll is pinned.

    randint() values are consumed by the land price and harvest multiplier
    rolls; randrange() values by the rats and plague rolls.
    """

    def __init__(
        self,
        randint_values: Iterable[int] = (),
        randrange_values: Iterable[int] = (),
    ):
        super().__init__(0)
        self.randint_values = list(randint_values)
        self.randrange_values = list(randrange_values)

    def randint(self, a: int, b: int) -> int:
        value = self.randint_values.pop(0)
        assert a <= value <= b, f"stubbed randint {value} outside [{a}, {b}]"
        return value

    def randrange(self, start: int, stop: Optional[int] = None, step: int = 1) -> int:
        if stop is None:
            start, stop = 0, start
        value = self.randrange_values.pop(0)
        assert start <= value < stop, f"stubbed randrange {value} outside [{start}, {stop})"
        return value
