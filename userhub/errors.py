"""Domain error taxonomy.

Every failure that leaves the user service is one of four kinds.  Protocol
adapters map ``DomainError.kind`` onto their own status codes; anything that
is not a ``DomainError`` is treated as ``ErrorKind.INTERNAL`` and reported
with a fixed message so storage or transport details never reach a client.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_INPUT = "INVALID_INPUT"
    INTERNAL = "INTERNAL"


class DomainError(Exception):
    """Base class for all domain errors.

    Subclasses fix ``kind`` and a default message; callers compare kinds
    (or use ``isinstance``) instead of inspecting the text.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UserNotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND
    default_message = "user not found"


class UserAlreadyExistsError(DomainError):
    kind = ErrorKind.ALREADY_EXISTS
    default_message = "user already exists"


class InvalidInputError(DomainError):
    kind = ErrorKind.INVALID_INPUT
    default_message = "invalid input"


class InternalError(DomainError):
    """Storage or cache fault.  The message is for logs, not for clients."""

    kind = ErrorKind.INTERNAL
    default_message = "internal server error"


INTERNAL_MESSAGE = InternalError.default_message

__all__ = [
    "ErrorKind",
    "DomainError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidInputError",
    "InternalError",
    "INTERNAL_MESSAGE",
]
