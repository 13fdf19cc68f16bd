from fastapi import Request, Response

from query_pagination.core.context import StarletteContext
from query_pagination.core.options import CustomOption, apply_custom_options
from query_pagination.core.paginator import PageParams, paginate

# ASGI scope key for the PageParams of the current request. Kept out of
# request.state so no configured parameter name can shadow it.
SCOPE_KEY = "query_pagination.params"


def store_page_params(request: Request, params: PageParams) -> None:
    request.scope[SCOPE_KEY] = params


class Pagination:
    """Route-level alternative to ``PaginationMiddleware``.

    Usage::

        @router.get("/things")
        async def list_things(params: Annotated[PageParams, Depends(Pagination())]): ...

    Rejections are raised as ``PaginationError`` and rendered by the handler
    from ``register_exception_handlers``.
    """

    def __init__(self, *custom_options: CustomOption) -> None:
        self.opts = apply_custom_options(*custom_options)

    async def __call__(self, request: Request, response: Response) -> PageParams:
        ctx = StarletteContext(request)
        params = paginate(self.opts, ctx)
        store_page_params(request, params)
        ctx.apply_headers(response)
        return params


def get_page_params(request: Request) -> PageParams:
    """Dependency returning the values stored by ``PaginationMiddleware``."""
    params = request.scope.get(SCOPE_KEY)
    if not isinstance(params, PageParams):
        raise RuntimeError("PaginationMiddleware did not run for this request")
    return params
