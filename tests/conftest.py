from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.testclient import TestClient
from pydantic import BaseModel

from requesthelpers.capabilities import RequestContext
from requesthelpers.error_helper import new_error_helper
from requesthelpers.errors import FIX_INVALID_ID
from requesthelpers.pagination import pagination_meta
from requesthelpers.request_helper import RequestHelper
from requesthelpers.validator import RequestValidator, new_request_validator
from requesthelpers.web import (
    FastAPIRequestContext,
    HandlerContext,
    JSONResponseHelper,
    handler_context,
    request_context,
)

# ── Fake collaborators ────────────────────────────────────────────────────────


class FakeContext:
    """In-memory ``RequestContext`` for unit tests."""

    def __init__(
        self,
        query: dict[str, str] | None = None,
        path: dict[str, str] | None = None,
        values: dict[str, str] | None = None,
        body: bytes = b'',
    ) -> None:
        self.query = query or {}
        self.path = path or {}
        self.values = values or {}
        self.body = body

    def get_query_param(self, name: str, default: str) -> str:
        return self.query.get(name, default)

    def get_path_param(self, name: str) -> str:
        return self.path.get(name, '')

    def get_context_value(self, name: str) -> str:
        return self.values.get(name, '')

    def get_body(self) -> bytes:
        return self.body


class RecordingResponseHelper:
    """``ResponseHelper`` that records every report, optionally forwarding it."""

    def __init__(self, forward_to: JSONResponseHelper | None = None) -> None:
        self.reports: list[tuple[RequestContext, str, str]] = []
        self.forward_to = forward_to

    def bad_request(self, ctx: RequestContext, message: str, fix: str) -> None:
        self.reports.append((ctx, message, fix))
        if self.forward_to is not None:
            self.forward_to.bad_request(ctx, message, fix)


class FakeCapabilities:
    def __init__(self, validator: RequestValidator | None = None) -> None:
        self.validator = validator or new_request_validator()
        self.response_helper = RecordingResponseHelper()

    def get_validator(self) -> RequestValidator:
        return self.validator

    def get_response_helper(self) -> RecordingResponseHelper:
        return self.response_helper


@pytest.fixture
def caps() -> FakeCapabilities:
    return FakeCapabilities()


# ── Demo app ──────────────────────────────────────────────────────────────────

RECORDS: list[dict[str, Any]] = [
    {'id': i, 'owner': 'alice' if i % 2 else 'bob', 'title': f'Record {i}'} for i in range(1, 26)
]


class RecordCreate(BaseModel):
    title: str


def create_app(helper: RequestHelper | None = None) -> FastAPI:
    app = FastAPI(title='requesthelpers demo')
    helper = helper or RequestHelper()
    error_helper = new_error_helper()

    @app.middleware('http')
    async def fake_auth(request: Request, call_next):
        username = request.headers.get('X-Username')
        if username is not None:
            request.state.username = username
        return await call_next(request)

    @app.get('/records')
    def list_records(ctx: FastAPIRequestContext = Depends(request_context)) -> dict[str, Any]:
        limit, offset = helper.get_limit_and_offset(ctx)
        rows = RECORDS[offset : offset + limit] if offset >= 0 and limit > 0 else []
        return {'data': rows, 'meta': pagination_meta(limit, offset, len(RECORDS))}

    @app.get('/records/{record_id}')
    def get_record(
        ctx: FastAPIRequestContext = Depends(request_context),
        h: HandlerContext = Depends(handler_context),
    ) -> Any:
        username, failed = helper.get_and_validate_username(ctx, h)
        if failed:
            return ctx.response
        record_id, failed = helper.validate_and_parse_id(h, 'record_id', ctx, FIX_INVALID_ID)
        if failed:
            return ctx.response
        record = next((r for r in RECORDS if r['id'] == record_id), None)
        if record is None:
            raise HTTPException(status_code=404, detail='Record not found.')
        if record['owner'] != username:
            err = error_helper.record_does_not_belong(record_id, username)
            raise HTTPException(status_code=403, detail=str(err))
        return record

    @app.post('/records', status_code=201)
    def create_record(
        ctx: FastAPIRequestContext = Depends(request_context),
        h: HandlerContext = Depends(handler_context),
    ) -> Any:
        username, failed = helper.get_and_validate_username(ctx, h)
        if failed:
            return ctx.response
        body, failed = helper.get_json_data(ctx, RecordCreate, h)
        if failed:
            return ctx.response
        return {'owner': username, 'title': body.title}

    return app


@pytest.fixture
def recorder() -> RecordingResponseHelper:
    return RecordingResponseHelper(forward_to=JSONResponseHelper())


@pytest.fixture
def app(recorder: RecordingResponseHelper) -> Generator[FastAPI, None, None]:
    app = create_app()
    app.dependency_overrides[handler_context] = lambda: HandlerContext(response_helper=recorder)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as client:
        yield client
