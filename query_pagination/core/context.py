"""The slice of a request the paginator reads from and writes to."""

from typing import Any, Protocol

from starlette.requests import Request
from starlette.responses import Response


class PaginationContext(Protocol):
    def get_query(self, key: str, default: str) -> str: ...

    def set(self, key: str, value: Any) -> None: ...

    def set_header(self, key: str, value: str) -> None: ...


class StarletteContext:
    """Adapts a Starlette request to ``PaginationContext``.

    Values land on ``request.state``, which is shared with the downstream
    handler through the ASGI scope. Headers are held back until the
    response exists and then written by ``apply_headers``.
    """

    def __init__(self, request: Request) -> None:
        self.request = request
        self.headers: dict[str, str] = {}

    def get_query(self, key: str, default: str) -> str:
        # First occurrence wins when a key repeats
        values = self.request.query_params.getlist(key)
        return values[0] if values else default

    def set(self, key: str, value: Any) -> None:
        setattr(self.request.state, key, value)

    def set_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def apply_headers(self, response: Response) -> None:
        for key, value in self.headers.items():
            response.headers[key] = value
