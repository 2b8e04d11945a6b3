"""Validation rules for request parameters."""

from __future__ import annotations

import re

from requesthelpers.errors import InvalidIDError, InvalidUsernameError

# Base-10 unsigned integer: ASCII digits with an optional leading '+'.
_UNSIGNED_RE = re.compile(r'\+?[0-9]+')


class RequestValidator:
    """Stateless validation rules. Raise on failure, return on success."""

    def validate_username(self, username: str) -> None:
        """Reject an empty username. No trimming or charset rules."""
        if username == '':
            raise InvalidUsernameError()

    def validate_id_and_parse(self, raw: str) -> int:
        """Parse a record ID. Zero, negatives and non-numeric input are invalid."""
        if not _UNSIGNED_RE.fullmatch(raw):
            raise InvalidIDError()
        try:
            record_id = int(raw)
        except ValueError:
            # Past the interpreter's int-conversion digit limit.
            raise InvalidIDError() from None
        if record_id == 0:
            raise InvalidIDError()
        return record_id


def new_request_validator() -> RequestValidator:
    return RequestValidator()
