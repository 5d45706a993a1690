"""
VirtualPets - Errors

Exceptions raised by the game core.
"""


class VPetsError(Exception):
    """Base class for all game errors."""


class InvalidSelection(VPetsError, ValueError):
    """Menu input that is not a number or not in the offered range."""

    def __init__(self, raw: str, low: int, high: int) -> None:
        super().__init__(f"{raw!r} is not a choice between {low} and {high}")
        self.raw = raw
        self.low = low
        self.high = high


class InvariantViolation(VPetsError, RuntimeError):
    """A programming contract was broken; never recoverable."""


class InputClosed(VPetsError, EOFError):
    """The input source has no more lines."""
