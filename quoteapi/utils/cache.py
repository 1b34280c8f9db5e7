from .constants import Server

VARY = "Origin, Accept-Encoding, If-None-Match"
CONTENT_TYPE = "application/json; charset=utf-8"


def cache_control() -> str:
    """Shared caches keep a response fresh for a while, then revalidate in the background."""
    return (
        f"public, s-maxage={Server.S_MAXAGE}, "
        f"stale-while-revalidate={Server.STALE_WHILE_REVALIDATE}"
    )


def response_headers(etag: str) -> dict[str, str]:
    """
    Headers sent with every response of the quote endpoint.

    Args:
        etag: The ETag of the loaded dataset.

    Returns:
        dict: Header names mapped to their values.
    """
    return {
        "Access-Control-Allow-Origin": "*",
        "Vary": VARY,
        "Cache-Control": cache_control(),
        "ETag": etag,
        "Content-Type": CONTENT_TYPE,
    }


def is_not_modified(if_none_match: str | None, etag: str) -> bool:
    """A conditional request matches only on an exact, non-empty ETag."""
    return bool(if_none_match) and if_none_match == etag
