import random
from typing import Annotated

from fastapi import Depends
from loguru import logger

from .. import dependencies
from ..sampler import filter_quotes, sample
from ..schemas import FilterSpec, Quote, QuoteResponse


class QuoteService:
    """
    Service class for picking random quotes out of the loaded dataset.
    """

    def __init__(self, dataset: dependencies.DatasetDep):
        """
        Initialize the QuoteService with the dataset loaded at startup.

        Args:
            dataset: Dataset dependency.
        """
        self.dataset = dataset

    @property
    def etag(self) -> str:
        return self.dataset.etag

    def get_candidates(self, spec: FilterSpec) -> list[Quote]:
        """
        Get the quotes matching a filter, or all quotes when none match.

        Args:
            spec: The filter to apply.

        Returns:
            List of candidate quotes.
        """
        return filter_quotes(self.dataset.quotes, spec)

    def random_quotes(
        self, spec: FilterSpec, limit: int, rng: random.Random
    ) -> QuoteResponse:
        """
        Draw up to ``limit`` distinct random quotes matching ``spec``.

        Args:
            spec: The filter to apply.
            limit: Maximum number of quotes to return.
            rng: Random generator of the current request.

        Returns:
            QuoteResponse: The drawn quotes and their count.
        """
        candidates = self.get_candidates(spec)
        result = sample(candidates, limit, rng)
        logger.debug(
            f"Picked {len(result)} of {len(candidates)} candidates for {spec!r}, "
            f"limit {limit}"
        )
        return QuoteResponse(count=len(result), result=result)


QuoteServiceDep = Annotated[QuoteService, Depends(QuoteService)]
