"""
Error types raised by the pixel-transformation engine.
"""


class InvalidInputError(ValueError):
    """Raised when an image, matrix, kernel or filter argument is malformed."""


class UnknownLookError(KeyError):
    """Raised when a look name is not present in the registry."""

    def __init__(self, name: str, available=None):
        self.name = name
        self.available = list(available or [])
        message = f"Unknown look '{name}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return self.args[0]


class AllocationFailureError(MemoryError):
    """
    Raised when an output or intermediate pixel buffer cannot be allocated.

    This is fatal for the current call. The engine never retries; callers
    may retry with a downscaled image.
    """
