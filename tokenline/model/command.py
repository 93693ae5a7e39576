"""Closed set of queue commands."""

from enum import Enum


class UnrecognizedCommandError(ValueError):
    """Raised when command text matches no known command."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unrecognized command: {text!r}")


class Command(Enum):
    """Commands accepted from the slash-command text."""

    LIST = "list"
    GET = "get"
    DROP = "drop"
    AFTER_YOU = "afteryou"
    BARGE = "barge"
    STEAL = "steal"

    @classmethod
    def parse(cls, text: str) -> "Command":
        """Parse raw command text (case-insensitive, surrounding whitespace ignored).

        Args:
            text: Text typed after the slash command.

        Returns:
            The matching Command.

        Raises:
            UnrecognizedCommandError: If the text matches no command.
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise UnrecognizedCommandError(text) from None
