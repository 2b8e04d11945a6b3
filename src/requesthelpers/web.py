"""FastAPI bindings for the request helpers."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from requesthelpers.capabilities import RequestContext, ResponseHelper
from requesthelpers.validator import RequestValidator, new_request_validator


class ErrorResponse(BaseModel):
    """Body of an error response."""

    status: int = Field(description='HTTP status code.')
    error: str = Field(description='Short description of what went wrong.')
    fix: str = Field(default='', description='How the caller can fix the request.')


class FastAPIRequestContext:
    """``RequestContext`` over a Starlette request.

    Context values are read from ``request.state``, where auth middleware
    stores them. A reported failure leaves its response in ``response``.
    """

    def __init__(self, request: Request, body: bytes = b'') -> None:
        self.request = request
        self.body = body
        self.response: JSONResponse | None = None

    def get_query_param(self, name: str, default: str) -> str:
        return self.request.query_params.get(name, default)

    def get_path_param(self, name: str) -> str:
        return str(self.request.path_params.get(name, ''))

    def get_context_value(self, name: str) -> str:
        value = getattr(self.request.state, name, None)
        return value if isinstance(value, str) else ''

    def get_body(self) -> bytes:
        return self.body


class JSONResponseHelper:
    """``ResponseHelper`` that renders errors as JSON onto the request context."""

    def bad_request(self, ctx: RequestContext, message: str, fix: str) -> None:
        if not isinstance(ctx, FastAPIRequestContext):
            msg = f'JSONResponseHelper needs a FastAPIRequestContext, got {type(ctx).__name__}'
            raise TypeError(msg)
        body = ErrorResponse(status=400, error=message, fix=fix)
        ctx.response = JSONResponse(status_code=400, content=body.model_dump())


class HandlerContext:
    """Validator and response helper bundled for ``RequestHelper`` calls."""

    def __init__(
        self,
        validator: RequestValidator | None = None,
        response_helper: ResponseHelper | None = None,
    ) -> None:
        self.validator = validator or new_request_validator()
        self.response_helper = response_helper or JSONResponseHelper()

    def get_validator(self) -> RequestValidator:
        return self.validator

    def get_response_helper(self) -> ResponseHelper:
        return self.response_helper


async def request_context(request: Request) -> FastAPIRequestContext:
    """Dependency that wraps the current request, body included."""
    body = await request.body()
    return FastAPIRequestContext(request, body)


def handler_context() -> HandlerContext:
    """Dependency providing the default validator and JSON response helper."""
    return HandlerContext()
