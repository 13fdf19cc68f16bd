DEFAULT_HEADER_PREFIX = "X-"


def construct_header(name: str, prefix: str = DEFAULT_HEADER_PREFIX) -> str:
    """Build a response header name from a query parameter name.

    The first character is upper-cased and the rest kept as is, so
    ``"pageSize"`` becomes ``"X-PageSize"``. An empty name yields ``""``.
    """
    if not name:
        return ""
    return f"{prefix}{name[0].upper()}{name[1:]}"
