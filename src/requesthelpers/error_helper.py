from __future__ import annotations

from typing import Any

from requesthelpers.errors import OwnershipError


class ErrorHelper:
    """Builds display-only domain error messages."""

    def record_does_not_belong(self, record_id: Any, user: str) -> OwnershipError:
        return OwnershipError(f'the record {record_id} does not belong to {user}')


def new_error_helper() -> ErrorHelper:
    return ErrorHelper()
