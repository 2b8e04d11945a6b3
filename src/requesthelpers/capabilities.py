"""Collaborator interfaces the helpers depend on.

These are structural: any object with the right methods qualifies, so
handler contexts compose capabilities without inheriting from a base class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from requesthelpers.validator import RequestValidator


@runtime_checkable
class RequestContext(Protocol):
    """Read access to the current request."""

    def get_query_param(self, name: str, default: str) -> str: ...

    def get_path_param(self, name: str) -> str: ...

    def get_context_value(self, name: str) -> str:
        """Value stored on the request by upstream middleware, '' if unset."""
        ...


@runtime_checkable
class BodyContext(RequestContext, Protocol):
    def get_body(self) -> bytes: ...


@runtime_checkable
class ResponseHelper(Protocol):
    """Sink for error responses."""

    def bad_request(self, ctx: RequestContext, message: str, fix: str) -> None: ...


@runtime_checkable
class HasValidator(Protocol):
    def get_validator(self) -> RequestValidator: ...


@runtime_checkable
class HasResponseHelper(Protocol):
    def get_response_helper(self) -> ResponseHelper: ...


@runtime_checkable
class HasValidatorAndResponseHelper(HasValidator, HasResponseHelper, Protocol):
    """Capability set required by ``RequestHelper``."""
