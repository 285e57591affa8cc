"""
Console collaborators: prompts and narration on stdout, answers from stdin.
"""

import sys
from typing import Callable, TextIO, Optional


class ConsoleIO:
    """Implements both the output sink and the input source on a terminal."""

    def __init__(
        self,
        read_line: Callable[[], str] = input,
        stream: Optional[TextIO] = None,
    ):
        self.read_line = read_line
        self.stream = stream or sys.stdout

    def show(self, text: str) -> None:
        # Prompts end with a space and keep the cursor on the same line
        end = "" if text.endswith(" ") else "\n"
        print(text, end=end, file=self.stream, flush=True)

    def read_integer(self) -> int:
        """Read one line and parse it; int() raises ValueError on garbage."""
        return int(self.read_line().strip())

    def read_answer(self) -> str:
        """Read a free-form answer such as y/n."""
        return self.read_line().strip()
