"""Pagination arithmetic: page/page-size to limit/offset and back to display metadata."""

from __future__ import annotations

import re
from enum import StrEnum
from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from requesthelpers.capabilities import RequestContext

DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE = 1

_INT_RE = re.compile(r'[+-]?[0-9]+')


class QueryStyle(StrEnum):
    """Naming scheme for the pagination query parameters."""

    page_no = 'page_no'  # ?page-size=10&page-no=1
    per_page = 'per_page'  # ?per-page=10&page=1


class ParseFallback(StrEnum):
    """What an unparsable pagination value becomes."""

    zero = 'zero'
    default = 'default'


# (page-size param, page param) per style.
QUERY_PARAM_NAMES: dict[QueryStyle, tuple[str, str]] = {
    QueryStyle.page_no: ('page-size', 'page-no'),
    QueryStyle.per_page: ('per-page', 'page'),
}


class PageRequest(NamedTuple):
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE


class PageWindow(NamedTuple):
    limit: int
    offset: int


class PageMeta(BaseModel):
    """Display metadata for one page of a result set. Serialises with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_records: int
    total_pages: int
    current_page: int
    page_size: int


def parse_int(raw: str) -> int | None:
    """Strict base-10 parse; None when ``raw`` is not an integer."""
    if not _INT_RE.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def compute_window(page: int, page_size: int) -> PageWindow:
    """Convert a page number and size to limit/offset. No clamping is applied."""
    limit = page_size
    return PageWindow(limit=limit, offset=(page - 1) * limit)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _current_page(offset: int, limit: int) -> int:
    if limit == 0:
        return 0
    return _trunc_div(offset, limit) + 1


def _total_pages(total_records: int, limit: int) -> int:
    if limit == 0:
        return 0
    if total_records % limit == 0:
        return _trunc_div(total_records, limit)
    return _trunc_div(total_records, limit) + 1


def compute_meta(limit: int, offset: int, total_records: int) -> PageMeta:
    """Derive current page and page count from a window and the total row count."""
    return PageMeta(
        total_records=total_records,
        total_pages=_total_pages(total_records, limit),
        current_page=_current_page(offset, limit),
        page_size=limit,
    )


def pagination_meta(limit: int, offset: int, total_records: int) -> dict[str, Any]:
    """``compute_meta`` as a camelCase dict, ready to embed in a response body."""
    return compute_meta(limit, offset, total_records).model_dump(by_alias=True)


def read_page_request(
    ctx: RequestContext,
    style: QueryStyle = QueryStyle.per_page,
    fallback: ParseFallback = ParseFallback.zero,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    default_page: int = DEFAULT_PAGE,
) -> PageRequest:
    """Read page and page size from the query string.

    Absent parameters take the defaults. Unparsable ones become 0 under
    ``ParseFallback.zero`` and the defaults under ``ParseFallback.default``.
    """
    size_name, page_name = QUERY_PARAM_NAMES[style]
    raw_size = ctx.get_query_param(size_name, str(default_page_size))
    raw_page = ctx.get_query_param(page_name, str(default_page))

    if fallback is ParseFallback.default:
        size_fallback, page_fallback = default_page_size, default_page
    else:
        size_fallback, page_fallback = 0, 0

    page_size = parse_int(raw_size)
    page = parse_int(raw_page)
    return PageRequest(
        page=page_fallback if page is None else page,
        page_size=size_fallback if page_size is None else page_size,
    )
