"""Configuration for the pagination interceptor.

Options are assembled from a fixed default record plus any number of
override callables, applied in the order given::

    opts = apply_custom_options(with_page_text("offset"), with_max_page_size(50))

No validation happens here. A configuration with ``min_page_size`` greater
than ``max_page_size`` is accepted and makes every request fail the size
bounds check.
"""

from collections.abc import Callable, MutableMapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from query_pagination.config import Settings


class PaginationOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_text: str = "page"
    size_text: str = "size"
    default_page: int = 1
    default_page_size: int = 10
    min_page_size: int = 10
    max_page_size: int = 100
    # Empty string disables the response headers
    header_prefix: str = "X-"


CustomOption = Callable[[MutableMapping[str, Any]], None]

DEFAULT_OPTIONS = PaginationOptions()


def with_page_text(page_text: str) -> CustomOption:
    """Rename the page query parameter (and its context key)."""

    def option(opts: MutableMapping[str, Any]) -> None:
        opts["page_text"] = page_text

    return option


def with_size_text(size_text: str) -> CustomOption:
    """Rename the size query parameter (and its context key)."""

    def option(opts: MutableMapping[str, Any]) -> None:
        opts["size_text"] = size_text

    return option


def with_default_page(page: int) -> CustomOption:
    def option(opts: MutableMapping[str, Any]) -> None:
        opts["default_page"] = page

    return option


def with_default_page_size(page_size: int) -> CustomOption:
    def option(opts: MutableMapping[str, Any]) -> None:
        opts["default_page_size"] = page_size

    return option


def with_min_page_size(min_page_size: int) -> CustomOption:
    def option(opts: MutableMapping[str, Any]) -> None:
        opts["min_page_size"] = min_page_size

    return option


def with_max_page_size(max_page_size: int) -> CustomOption:
    def option(opts: MutableMapping[str, Any]) -> None:
        opts["max_page_size"] = max_page_size

    return option


def with_header_prefix(header_prefix: str) -> CustomOption:
    """Set the response header prefix. An empty string turns headers off."""

    def option(opts: MutableMapping[str, Any]) -> None:
        opts["header_prefix"] = header_prefix

    return option


def apply_custom_options(*custom_options: CustomOption) -> PaginationOptions:
    draft = DEFAULT_OPTIONS.model_dump()
    for custom_option in custom_options:
        custom_option(draft)
    return PaginationOptions(**draft)


def options_from_settings(settings: Settings) -> list[CustomOption]:
    """Translate the ``PAGINATION_*`` settings into override callables."""
    return [
        with_page_text(settings.pagination_page_text),
        with_size_text(settings.pagination_size_text),
        with_default_page(settings.pagination_default_page),
        with_default_page_size(settings.pagination_default_page_size),
        with_min_page_size(settings.pagination_min_page_size),
        with_max_page_size(settings.pagination_max_page_size),
        with_header_prefix(settings.pagination_header_prefix),
    ]
