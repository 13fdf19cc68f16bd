"""Page/size query parameter validation for Starlette and FastAPI.

Install ``PaginationMiddleware`` to validate ``?page=&size=`` on every
request, or depend on ``Pagination()`` per route.
"""

from query_pagination.core.exceptions import (
    InvalidIntegerError,
    InvalidRangeError,
    PaginationError,
)
from query_pagination.core.headers import construct_header
from query_pagination.core.middleware import PaginationMiddleware
from query_pagination.core.options import (
    PaginationOptions,
    apply_custom_options,
    with_default_page,
    with_default_page_size,
    with_header_prefix,
    with_max_page_size,
    with_min_page_size,
    with_page_text,
    with_size_text,
)
from query_pagination.core.pagination import Pagination, get_page_params
from query_pagination.core.paginator import PageParams, paginate

__all__ = [
    "InvalidIntegerError",
    "InvalidRangeError",
    "PageParams",
    "Pagination",
    "PaginationError",
    "PaginationMiddleware",
    "PaginationOptions",
    "apply_custom_options",
    "construct_header",
    "get_page_params",
    "paginate",
    "with_default_page",
    "with_default_page_size",
    "with_header_prefix",
    "with_max_page_size",
    "with_min_page_size",
    "with_page_text",
    "with_size_text",
]
