import random
from collections.abc import Sequence
from typing import TypeVar

from .schemas import FilterSpec, Quote

T = TypeVar("T")


def matches(quote: Quote, spec: FilterSpec) -> bool:
    """Check a quote against every non-empty constraint of ``spec``."""
    if spec.quote_id and quote.id != spec.quote_id:
        return False
    if spec.lang and quote.lang.lower() != spec.lang.lower():
        return False
    if spec.category and quote.category.lower() != spec.category.lower():
        return False
    return True


def filter_quotes(quotes: Sequence[Quote], spec: FilterSpec) -> list[Quote]:
    """
    Keep the quotes matching ``spec``.

    When nothing matches, every quote is returned instead so that a request
    always gets a result.

    Args:
        quotes: All quotes of the dataset.
        spec: The filter to apply.

    Returns:
        list[Quote]: The candidate quotes, never empty unless ``quotes`` is.
    """
    candidates = [quote for quote in quotes if matches(quote, spec)]
    if not candidates:
        return list(quotes)
    return candidates


def sample(candidates: Sequence[T], limit: int, rng: random.Random) -> list[T]:
    """
    Draw up to ``limit`` candidates without replacement.

    If ``limit`` covers every candidate the whole set is returned in shuffled
    order, otherwise ``limit`` distinct candidates are picked uniformly.
    ``candidates`` itself is left untouched.

    Args:
        candidates: Items to draw from.
        limit: Maximum number of items to return.
        rng: Random generator owned by the caller.

    Returns:
        list: The drawn items.
    """
    if limit >= len(candidates):
        shuffled = list(candidates)
        rng.shuffle(shuffled)
        return shuffled
    return rng.sample(candidates, limit)


def new_rng() -> random.Random:
    """Create a generator seeded from the OS, one per request."""
    return random.Random()
