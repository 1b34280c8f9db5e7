import re
from typing import Protocol

from .constants import Server
from .schemas import FilterSpec

_INTEGER = re.compile(r"[+-]?[0-9]+")


class MultiParams(Protocol):
    def getlist(self, key: str) -> list[str]: ...


def _first(params: MultiParams, name: str) -> str:
    """Return the first value of a query parameter, or an empty string."""
    values = params.getlist(name)
    return values[0] if values else ""


def parse_limit(raw: str | None) -> int:
    """
    Parse the ``limit`` query parameter.

    Anything that is not an integer between 1 and ``Server.MAX_LIMIT`` falls back
    to ``Server.DEFAULT_LIMIT``. A bad value is never an error.

    Args:
        raw: The raw parameter value, None when the parameter is absent.

    Returns:
        int: The effective limit.
    """
    if not raw or not _INTEGER.fullmatch(raw):
        return Server.DEFAULT_LIMIT
    try:
        value = int(raw)
    except ValueError:
        # longer than the interpreter converts
        return Server.DEFAULT_LIMIT
    if 0 < value <= Server.MAX_LIMIT:
        return value
    return Server.DEFAULT_LIMIT


def resolve_query(params: MultiParams) -> tuple[FilterSpec, int]:
    """
    Turn request query parameters into a filter and a result limit.

    ``id`` is kept as is, ``lang`` and ``category`` are lower-cased.

    Args:
        params: Query parameters, e.g. ``request.query_params``.

    Returns:
        tuple[FilterSpec, int]: The filter specification and the effective limit.
    """
    spec = FilterSpec(
        quote_id=_first(params, "id"),
        lang=_first(params, "lang").lower(),
        category=_first(params, "category").lower(),
    )
    return spec, parse_limit(_first(params, "limit"))


def wants_pretty(params: MultiParams) -> bool:
    """Indented output is only used for ``pretty=1``."""
    return _first(params, "pretty") == "1"
