"""Command outcomes and expected failures."""

from dataclasses import dataclass
from enum import Enum


class ErrorType(Enum):
    """Classification of expected command failures."""

    INVALID_INPUT = "invalid_input"
    SYSTEM_DAMAGED = "system_damaged"
    INSUFFICIENT_RESOURCE = "insufficient_resource"
    RESOURCE_EXHAUSTED = "resource_exhausted"
    NO_TARGET = "no_target"


class CommandError(Exception):
    """Raised by command validation when a command cannot be carried out."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize command error.

        Args:
            error_type: Classification of the error
            message: Text shown to the player
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


@dataclass
class CommandResult:
    """Outcome of one command.

    Attributes:
        success: False if the command was rejected (nothing was changed)
        message: Report text shown to the player (may be empty)
        time_consumed: Stardates the command takes; the command loop
            advances the mission clock by this amount
        error_type: Failure classification, None on success
    """

    success: bool
    message: str = ""
    time_consumed: float = 0.0
    error_type: ErrorType | None = None

    def __post_init__(self):
        """Validate result after initialization."""
        if self.time_consumed < 0:
            raise ValueError(f"Invalid time_consumed: {self.time_consumed} (must be >= 0)")
        if self.success and self.error_type is not None:
            raise ValueError("Successful result cannot carry an error type")

    @property
    def consumes_time(self) -> bool:
        return self.time_consumed > 0

    @classmethod
    def ok(cls, message: str = "", time_consumed: float = 0.0) -> "CommandResult":
        return cls(success=True, message=message, time_consumed=time_consumed)

    @classmethod
    def failure(cls, error_type: ErrorType, message: str) -> "CommandResult":
        return cls(success=False, message=message, error_type=error_type)

    @classmethod
    def from_error(cls, error: CommandError) -> "CommandResult":
        return cls.failure(error.error_type, error.message)
