"""Application middleware."""

from collections.abc import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from query_pagination.core.context import StarletteContext
from query_pagination.core.exceptions import PaginationError, error_response, log_rejection
from query_pagination.core.logging import pagination_var
from query_pagination.core.options import CustomOption, apply_custom_options
from query_pagination.core.pagination import store_page_params
from query_pagination.core.paginator import paginate


class PaginationMiddleware(BaseHTTPMiddleware):
    """Validates ``?page=&size=`` before any route handler runs.

    Behaviour:
    - Missing parameters fall back to the configured defaults.
    - A non-integer value, a negative page or a size outside
      ``[min_page_size, max_page_size]`` ends the request with a 400 and
      ``{"error": "<message>"}``; the route handler is never called.
    - Otherwise the values are stored on ``request.state`` under the
      configured parameter names, the pair is kept for ``get_page_params``,
      and both are echoed in ``X-Page`` / ``X-Size`` style response headers
      unless the header prefix is empty.
    - Paths listed in ``exempt_paths``, and anything below them, pass
      through untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        *custom_options: CustomOption,
        exempt_paths: Iterable[str] = (),
    ) -> None:
        super().__init__(app)
        self.opts = apply_custom_options(*custom_options)
        self.exempt_paths = tuple(p.rstrip("/") for p in exempt_paths)

    def is_exempt(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self.exempt_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self.is_exempt(request.url.path):
            return await call_next(request)

        ctx = StarletteContext(request)
        try:
            params = paginate(self.opts, ctx)
        except PaginationError as exc:
            log_rejection(exc, request.url.path)
            return error_response(exc)

        store_page_params(request, params)
        token = pagination_var.set((str(params.page), str(params.size)))
        try:
            response = await call_next(request)
        finally:
            pagination_var.reset(token)
        ctx.apply_headers(response)
        return response
