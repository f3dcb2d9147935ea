"""Exception hierarchy for the Merkle funnel."""

from __future__ import annotations


class FunnelError(Exception):
    """
    Base exception for all Merkle funnel errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class EmptyInputError(FunnelError, ValueError):
    """
    Raised when a tree is requested for zero items.

    There is no default or placeholder root for an empty sequence.
    Callers must branch on this error explicitly.

    Attributes:
        operation: The operation that received the empty input.
    """

    def __init__(self, operation: str = "construct") -> None:
        self.operation = operation
        super().__init__(f"{operation} requires at least one item, got none")
