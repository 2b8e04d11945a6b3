"""Request parameter validation, pagination and error helpers for FastAPI handlers."""

from requesthelpers.capabilities import (
    BodyContext,
    HasResponseHelper,
    HasValidator,
    HasValidatorAndResponseHelper,
    RequestContext,
    ResponseHelper,
)
from requesthelpers.error_helper import ErrorHelper, new_error_helper
from requesthelpers.errors import (
    FIX_INVALID_ID,
    FIX_INVALID_REQUEST_DATA,
    FIX_INVALID_USERNAME,
    BadRequestBindingError,
    ErrorKind,
    InvalidIDError,
    InvalidUsernameError,
    OwnershipError,
    RequestHelperError,
)
from requesthelpers.pagination import (
    PageMeta,
    PageRequest,
    PageWindow,
    ParseFallback,
    QueryStyle,
    compute_meta,
    compute_window,
    pagination_meta,
)
from requesthelpers.request_helper import RequestHelper, new_request_helper
from requesthelpers.validator import RequestValidator, new_request_validator

__all__ = [
    'FIX_INVALID_ID',
    'FIX_INVALID_REQUEST_DATA',
    'FIX_INVALID_USERNAME',
    'BadRequestBindingError',
    'BodyContext',
    'ErrorHelper',
    'ErrorKind',
    'HasResponseHelper',
    'HasValidator',
    'HasValidatorAndResponseHelper',
    'InvalidIDError',
    'InvalidUsernameError',
    'OwnershipError',
    'PageMeta',
    'PageRequest',
    'PageWindow',
    'ParseFallback',
    'QueryStyle',
    'RequestContext',
    'RequestHelper',
    'RequestHelperError',
    'RequestValidator',
    'ResponseHelper',
    'compute_meta',
    'compute_window',
    'new_error_helper',
    'new_request_helper',
    'new_request_validator',
    'pagination_meta',
]
