"""Exception hierarchy for the library."""

from __future__ import annotations


class MpaException(Exception):
    """Base class for every error raised by the library."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MpaRuntimeError(MpaException, RuntimeError):
    """An error that can only be detected while running."""

    def __init__(self, message: str) -> None:
        super().__init__("MPA Runtime Error: " + message)


class MpaLogicError(MpaException, ValueError):
    """An error in the logic of a caller, such as an invalid argument."""

    def __init__(self, message: str) -> None:
        super().__init__("MPA Logic Error: " + message)


class InvalidRoundMode(MpaLogicError):
    """A rounding mode outside the supported range was requested."""

    def __init__(self, message: str) -> None:
        super().__init__("Invalid Round Mode: " + message)


class ResourceNotFound(MpaRuntimeError):
    """A required resource could not be found."""

    def __init__(self, message: str) -> None:
        super().__init__("Resource Not Found: " + message)


def check_round_mode(mode: int) -> int:
    """Return ``mode`` if it is a valid rounding mode (0-3), else raise."""
    if mode < 0 or mode > 3:
        raise InvalidRoundMode(
            f"Attempted to set rounding mode to {mode}. Valid range is 0-3."
        )
    return mode