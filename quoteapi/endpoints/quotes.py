from typing import Annotated

from fastapi import APIRouter, Header, Request
from fastapi.routing import APIRoute
from fastapi.responses import Response
from loguru import logger
from starlette.routing import Match
from starlette.types import Scope

from quoteapi.utils.cache import CONTENT_TYPE, is_not_modified, response_headers
from quoteapi.utils.errors import raise_method_not_allowed
from quoteapi.utils.query import resolve_query, wants_pretty
from quoteapi.utils.sampler import new_rng
from quoteapi.utils.schemas import QuoteResponse
from quoteapi.utils.services.quote_service import QuoteServiceDep

router = APIRouter()


class AnyMethodRoute(APIRoute):
    """Route that accepts every HTTP method, whatever its declared methods are."""

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope


def not_modified(headers: dict[str, str]) -> Response:
    return Response(status_code=304, headers=headers)


@router.get(
    "/",
    response_model=QuoteResponse,
    responses={304: {"description": "Dataset unchanged since the given ETag"}},
)
async def random_quotes(
    request: Request,
    quotes: QuoteServiceDep,
    if_none_match: Annotated[str | None, Header()] = None,
):
    """
    Return random quotes, optionally filtered.

    Query parameters:

    - `id`: exact quote id
    - `lang`: language, case-insensitive
    - `category`: category, case-insensitive
    - `limit`: number of quotes between 1 and 100, anything else counts as 1
    - `pretty`: `1` for indented output

    When no quote matches the filters, quotes are drawn from the whole dataset.
    A request with `If-None-Match` equal to the current ETag gets `304 Not Modified`.

    Returns:
        Response: `{"count": N, "result": [...]}` as JSON.
    """
    headers = response_headers(quotes.etag)
    if is_not_modified(if_none_match, quotes.etag):
        logger.debug(f"ETag {quotes.etag} matched, not modified")
        return not_modified(headers)

    spec, limit = resolve_query(request.query_params)
    payload = quotes.random_quotes(spec, limit, new_rng())

    indent = 2 if wants_pretty(request.query_params) else None
    return Response(
        content=payload.model_dump_json(indent=indent),
        status_code=200,
        headers=headers,
        media_type=CONTENT_TYPE,
    )


async def method_not_allowed(
    quotes: QuoteServiceDep,
    if_none_match: Annotated[str | None, Header()] = None,
):
    """Only GET is served, the ETag check still comes first."""
    headers = response_headers(quotes.etag)
    if is_not_modified(if_none_match, quotes.etag):
        return not_modified(headers)
    raise_method_not_allowed(headers)


# registered after the GET route, so it only sees the other methods
router.add_api_route(
    "/",
    method_not_allowed,
    methods=["POST"],
    include_in_schema=False,
    route_class_override=AnyMethodRoute,
)
