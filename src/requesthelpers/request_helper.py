"""Extract and validate request parameters on behalf of handlers.

Every operation reports failures through the caller's response helper and
returns a ``failed`` flag. Handlers must return as soon as it is True.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from requesthelpers.capabilities import (
    BodyContext,
    HasValidatorAndResponseHelper,
    RequestContext,
)
from requesthelpers.config import Settings, settings
from requesthelpers.errors import (
    FIX_INVALID_REQUEST_DATA,
    FIX_INVALID_USERNAME,
    BadRequestBindingError,
    RequestHelperError,
)
from requesthelpers.pagination import ParseFallback, QueryStyle, compute_window, read_page_request

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT', bound=BaseModel)

USERNAME_KEY = 'username'


class RequestHelper:
    def __init__(
        self,
        style: QueryStyle | None = None,
        fallback: ParseFallback | None = None,
        config: Settings | None = None,
    ) -> None:
        config = config or settings
        self.style = style or config.PAGINATION_STYLE
        self.fallback = fallback or config.PAGINATION_FALLBACK
        self.default_page_size = config.DEFAULT_PAGE_SIZE
        self.default_page = config.DEFAULT_PAGE

    def get_and_validate_username(
        self, ctx: RequestContext, h: HasValidatorAndResponseHelper
    ) -> tuple[str, bool]:
        """Return the authenticated username set by upstream auth middleware."""
        username = ctx.get_context_value(USERNAME_KEY)
        try:
            h.get_validator().validate_username(username)
        except RequestHelperError as e:
            logger.debug('Username validation failed: %s', e)
            h.get_response_helper().bad_request(ctx, e.message, FIX_INVALID_USERNAME)
            return '', True
        return username, False

    def validate_and_parse_id(
        self,
        h: HasValidatorAndResponseHelper,
        param_name: str,
        ctx: RequestContext,
        fix_message: str,
    ) -> tuple[int, bool]:
        """Parse the path param ``param_name`` as a positive record ID."""
        raw = ctx.get_path_param(param_name)
        try:
            record_id = h.get_validator().validate_id_and_parse(raw)
        except RequestHelperError as e:
            logger.debug('Invalid %s path param %r: %s', param_name, raw, e)
            h.get_response_helper().bad_request(ctx, e.message, fix_message)
            return 0, True
        return record_id, False

    def get_limit_and_offset(self, ctx: RequestContext) -> tuple[int, int]:
        """Limit and offset from the pagination query params."""
        page_request = read_page_request(
            ctx,
            style=self.style,
            fallback=self.fallback,
            default_page_size=self.default_page_size,
            default_page=self.default_page,
        )
        window = compute_window(page_request.page, page_request.page_size)
        return window.limit, window.offset

    def get_url_param(self, ctx: RequestContext, name: str) -> str:
        return ctx.get_path_param(name)

    def get_json_data(
        self, ctx: BodyContext, model: type[ModelT], h: HasValidatorAndResponseHelper
    ) -> tuple[ModelT | None, bool]:
        """Bind the JSON request body to ``model``."""
        try:
            data = model.model_validate_json(ctx.get_body())
        except ValidationError as e:
            logger.warning('Error binding JSON: %s', e)
            err = BadRequestBindingError()
            h.get_response_helper().bad_request(ctx, err.message, FIX_INVALID_REQUEST_DATA)
            return None, True
        return data, False


def new_request_helper(
    style: QueryStyle | None = None, fallback: ParseFallback | None = None
) -> RequestHelper:
    return RequestHelper(style=style, fallback=fallback)
