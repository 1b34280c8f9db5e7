import json
import sys
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

# Add project root to sys.path for imports
sys.path.append(str(Path(__file__).resolve().parent.parent))

from quoteapi.main import app
from quoteapi.utils import dataset as dataset_store
from quoteapi.utils.dependencies import get_dataset

# three quotes: a and b in english, c in french
SMALL_QUOTES = [
    {"id": "a", "author": "Ann", "text": "First quote.", "lang": "en", "category": "Life"},
    {"id": "b", "author": "", "text": "Second quote.", "lang": "EN", "category": "work"},
    {"id": "c", "author": "Claude", "text": "Troisième citation.", "lang": "fr", "category": "life"},
]


def make_raw(quotes: list[dict]) -> bytes:
    return json.dumps(quotes, ensure_ascii=False).encode("utf-8")


@pytest.fixture
def small_raw():
    return make_raw(SMALL_QUOTES)


@pytest.fixture
def small_dataset(small_raw):
    return dataset_store.load(small_raw)


@pytest.fixture
def large_dataset():
    quotes = [
        {
            "id": f"q{i}",
            "author": f"Author {i % 7}",
            "text": f"Quote number {i}.",
            "lang": "en" if i % 2 else "de",
            "category": "wisdom" if i % 3 else "humor",
        }
        for i in range(150)
    ]
    return dataset_store.load(make_raw(quotes))


@pytest.fixture
async def client(small_dataset):
    """
    AsyncClient factory for testing.
    The small dataset is served unless another one is passed in.
    """
    clients = []

    async def _client(dataset=None):
        served = dataset if dataset is not None else small_dataset

        async def override_get_dataset():
            return served

        app.dependency_overrides[get_dataset] = override_get_dataset
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield _client

    for ac in clients:
        await ac.aclose()
    app.dependency_overrides.clear()
