import logging
import re

from pydantic import BaseModel

from query_pagination.core.context import PaginationContext
from query_pagination.core.exceptions import (
    InvalidIntegerError,
    NegativePageError,
    PageSizeOutOfBoundsError,
)
from query_pagination.core.headers import construct_header
from query_pagination.core.options import PaginationOptions

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only; int() alone would also take "1_0" and " 5 "
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Parsed values must fit a signed 64-bit integer
MIN_INT = -(2**63)
MAX_INT = 2**63 - 1


class PageParams(BaseModel):
    page: int
    size: int


class Paginator:
    def __init__(self, opts: PaginationOptions, ctx: PaginationContext) -> None:
        self.opts = opts
        self.ctx = ctx

    def get_page_from_request(self) -> int:
        return self._get_int_value_with_default(self.opts.page_text, self.opts.default_page)

    def get_page_size_from_request(self) -> int:
        return self._get_int_value_with_default(self.opts.size_text, self.opts.default_page_size)

    def _get_int_value_with_default(self, key: str, default: int) -> int:
        value = self.ctx.get_query(key, str(default))
        if not _INTEGER_RE.fullmatch(value):
            raise InvalidIntegerError(key)
        try:
            number = int(value)
        except ValueError:
            # longer than the interpreter's integer string conversion limit
            raise InvalidIntegerError(key) from None
        if not MIN_INT <= number <= MAX_INT:
            raise InvalidIntegerError(key)
        return number

    def validate_page(self, page: int) -> None:
        if page < 0:
            raise NegativePageError(self.opts.page_text)

    def validate_page_size(self, size: int) -> None:
        if size < self.opts.min_page_size or size > self.opts.max_page_size:
            raise PageSizeOutOfBoundsError(
                self.opts.size_text, self.opts.min_page_size, self.opts.max_page_size
            )

    def set_page_and_page_size(self, page: int, size: int) -> PageParams:
        params = PageParams(page=page, size=size)
        self.ctx.set(self.opts.page_text, page)
        self.ctx.set(self.opts.size_text, size)

        if self.opts.header_prefix:
            prefix = self.opts.header_prefix
            self.ctx.set_header(construct_header(self.opts.page_text, prefix), str(page))
            self.ctx.set_header(construct_header(self.opts.size_text, prefix), str(size))
        return params

    def run(self) -> PageParams:
        page = self.get_page_from_request()
        self.validate_page(page)

        size = self.get_page_size_from_request()
        self.validate_page_size(size)

        params = self.set_page_and_page_size(page, size)
        logger.debug("Pagination accepted", extra={"page": page, "size": size})
        return params


def paginate(opts: PaginationOptions, ctx: PaginationContext) -> PageParams:
    """Validate the page and size query values and publish them to ``ctx``.

    Raises ``InvalidIntegerError`` or ``InvalidRangeError`` on the first bad
    value, in which case nothing has been written to ``ctx``.
    """
    return Paginator(opts, ctx).run()
