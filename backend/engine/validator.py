"""
Input validation for the ruler's decisions.

Handles:
- Prompting through the output sink
- Reading integers from the input source
- Range checking with retry on bad input
"""

import logging
from typing import Optional, Protocol


logger = logging.getLogger(__name__)


class InputSource(Protocol):
    """Anything that can hand the validator one integer at a time."""

    def read_integer(self) -> int:
        """Return the next integer, raising ValueError if it does not parse."""
        ...


class OutputSink(Protocol):
    """Anything that can show text to the ruler."""

    def show(self, text: str) -> None: ...


class MessageRenderer(Protocol):
    """Anything that turns a message key into display text."""

    def render(self, key: str, **values) -> str: ...


class InputExhaustedError(Exception):
    """Raised when a retry cap is set and no valid value arrived in time."""

    pass


class InputValidator:
    """Asks for bounded integers until the ruler supplies one."""

    def __init__(
        self,
        source: InputSource,
        sink: OutputSink,
        catalog: MessageRenderer,
        max_attempts: Optional[int] = None,
    ):
        """
        Args:
            source: Where integers are read from
            sink: Where prompts and error messages go
            catalog: MessageCatalog used for the error wording
            max_attempts: Optional retry cap, None means ask forever
        """
        if max_attempts is not None and max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

        self.source = source
        self.sink = sink
        self.catalog = catalog
        self.max_attempts = max_attempts

    def request_bounded_integer(
        self,
        prompt: str,
        min_inclusive: int,
        max_inclusive: int,
        error_message: Optional[str] = None,
    ) -> int:
        """
        Request an integer in [min_inclusive, max_inclusive].

        Args:
            prompt: Text shown before every read
            min_inclusive: Smallest accepted value
            max_inclusive: Largest accepted value
            error_message: Specific complaint for this question, generic if None

        Returns:
            The first value read that parses and lies inside the range

        Raises:
            ValueError: If the range is inverted
            InputExhaustedError: If max_attempts reads all failed
        """
        if max_inclusive < min_inclusive:
            raise ValueError(
                f"Empty range [{min_inclusive}, {max_inclusive}] for prompt {prompt!r}"
            )

        attempts = 0
        while True:
            self.sink.show(prompt)
            attempts += 1

            try:
                value = self.source.read_integer()
            except ValueError as e:
                logger.debug(f"Unparseable input for {prompt!r}: {e}")
                value = None

            if value is not None and min_inclusive <= value <= max_inclusive:
                return value

            if value is not None:
                logger.debug(
                    f"Rejected {value} outside [{min_inclusive}, {max_inclusive}]"
                )

            if error_message:
                self.sink.show(self.catalog.render("error", message=error_message))
            else:
                self.sink.show(
                    self.catalog.render(
                        "error", message=self.catalog.render("invalid_input")
                    )
                )

            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise InputExhaustedError(
                    f"No valid answer to {prompt!r} after {attempts} attempts"
                )
