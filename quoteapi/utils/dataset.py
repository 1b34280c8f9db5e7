"""
Loading of the quote dataset.

The dataset is read once while the application starts and is never changed
afterwards, so request handlers share it without any locking.
"""

import hashlib
from importlib import resources
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from .errors import DatasetError
from .schemas import Dataset, Quote

_quote_list = TypeAdapter(list[Quote])


def make_etag(raw: bytes) -> str:
    """
    Compute the weak ETag for the raw dataset bytes.

    Args:
        raw: The exact bytes the quotes were parsed from.

    Returns:
        str: A weak validator in the form W/"<sha1 hex digest>".
    """
    return f'W/"{hashlib.sha1(raw).hexdigest()}"'


def load(raw: bytes) -> Dataset:
    """
    Parse raw JSON bytes into a Dataset.

    Args:
        raw: JSON array of quote objects.

    Returns:
        Dataset: The parsed quotes and the ETag of ``raw``.

    Raises:
        DatasetError: If ``raw`` is not a valid list of quotes or ids repeat.
    """
    try:
        quotes = _quote_list.validate_json(raw)
    except ValidationError as e:
        raise DatasetError(f"invalid quote dataset: {e}") from e

    seen = set()
    for quote in quotes:
        if quote.id in seen:
            raise DatasetError(f"duplicate quote id '{quote.id}'")
        seen.add(quote.id)

    if not quotes:
        logger.warning("Quote dataset is empty, responses will have no results.")

    return Dataset(quotes=tuple(quotes), etag=make_etag(raw))


def read_raw(path: Path | None = None) -> bytes:
    """
    Read the dataset bytes from ``path`` or from the file packaged with quoteapi.

    Raises:
        DatasetError: If the file can not be read.
    """
    try:
        if path is None:
            return resources.files("quoteapi.data").joinpath("quotes.json").read_bytes()
        return Path(path).read_bytes()
    except OSError as e:
        raise DatasetError(f"unable to read quote dataset: {e}") from e


def read_dataset(path: Path | None = None) -> Dataset:
    """Read and parse the dataset in one go."""
    dataset = load(read_raw(path))
    logger.info(
        f"Loaded {len(dataset.quotes)} quotes from {path or 'packaged dataset'} "
        f"(etag {dataset.etag})"
    )
    return dataset
