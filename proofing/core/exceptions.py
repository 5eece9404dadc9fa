# proofing/core/exceptions.py

"""Custom exception hierarchy for the proofing system.

This module defines the error types used to separate configuration
problems, span remapping failures, and faults of the external collaborators
(text source and grammar checker).
"""


class ProofingError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(ProofingError):
    """Raised when configuration loading or validation fails."""

    pass


class OffsetOverlapError(ProofingError):
    """Raised when an issue span cannot be mapped onto the text.

    The span is either out of bounds once drift is applied, or it starts
    before the end of the previous issue. ``offset`` and ``length`` are the
    offending issue's values in original-text coordinates.
    """

    def __init__(self, offset: int, length: int, reason: str) -> None:
        self.offset = offset
        self.length = length
        self.reason = reason
        super().__init__(f"Invalid issue span (offset={offset}, length={length}): {reason}")


class NoTextError(ProofingError):
    """Raised when the text source has nothing to proofread."""

    pass


class CheckerError(ProofingError):
    """Base exception for grammar checker faults."""

    pass


class ServiceError(CheckerError):
    """Raised when the grammar checker call fails."""

    pass


class MalformedResponseError(CheckerError):
    """Raised when the checker response lacks a valid issue list."""

    pass
