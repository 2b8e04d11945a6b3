"""Error kinds, remediation hints and exception types shared by the helpers."""

from __future__ import annotations

from enum import StrEnum

# ── Error kinds ────────────────────────────────────────────────────────────────


class ErrorKind(StrEnum):
    """Closed set of error kinds. The value is the default message."""

    BAD_REQUEST = 'bad request'
    NOT_FOUND = 'not found'
    FORBIDDEN = 'forbidden'
    INTERNAL = 'internal server error'
    INVALID_USERNAME = 'invalid username'
    INVALID_ID = 'invalid ID'


# ── Remediation hints ──────────────────────────────────────────────────────────

FIX_INVALID_USERNAME = 'Please provide a valid username.'
FIX_INVALID_ID = 'Please provide a valid ID.'
FIX_INVALID_REQUEST_DATA = 'Please check the request data and try again.'


# ── Exceptions ─────────────────────────────────────────────────────────────────


class RequestHelperError(Exception):
    """Base for errors raised by the validation layer."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.kind.value
        super().__init__(self.message)


class InvalidUsernameError(RequestHelperError):
    kind = ErrorKind.INVALID_USERNAME


class InvalidIDError(RequestHelperError):
    kind = ErrorKind.INVALID_ID


class BadRequestBindingError(RequestHelperError):
    """The request body could not be bound to the expected schema."""

    kind = ErrorKind.BAD_REQUEST


class OwnershipError(RequestHelperError):
    """A record was accessed by a user who does not own it. Message only."""

    kind = ErrorKind.FORBIDDEN
