"""
Product Catalog Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── data_file: Temp JSON data file seeded with []
    ├── images_dir: Temp images directory, wired into settings
    ├── file_repo: JsonFileProductRepository over data_file
    ├── memory_repo: Empty InMemoryProductRepository
    ├── sample_products: Three stored product records
    └── test_client: HTTPX AsyncClient talking to the app over ASGI
"""

import os
import tempfile

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Point settings at throwaway paths BEFORE any product_catalog import
_TEST_ROOT = tempfile.mkdtemp(prefix="product_catalog_test_")
os.environ["DATA_FILE"] = os.path.join(_TEST_ROOT, "data.json")
os.environ["IMAGES_DIR"] = os.path.join(_TEST_ROOT, "images")
os.environ["PUBLIC_BASE_URL"] = "http://localhost:8989"
os.environ["LOG_LEVEL"] = "WARNING"

from product_catalog.config import settings  # noqa: E402
from product_catalog.storage import (  # noqa: E402
    InMemoryProductRepository,
    JsonFileProductRepository,
    get_repository,
)


@pytest.fixture
def sample_products():
    """Stored records as they would appear in data.json."""
    return [
        {"id": 1, "name": "Fern", "price": 10, "image": "1.jpg"},
        {"id": 2, "name": "Monstera", "price": 24.5, "image": "monstera leaf.png"},
        {"id": 5, "name": "Cactus", "price": 7},
    ]


@pytest.fixture
def data_file(tmp_path):
    """An empty collection on disk."""
    path = tmp_path / "data.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def images_dir(tmp_path, monkeypatch):
    """A fresh images directory that settings (and so ImageService) point at."""
    path = tmp_path / "images"
    path.mkdir()
    monkeypatch.setattr(settings, "images_dir", str(path))
    return path


@pytest.fixture
def file_repo(data_file):
    return JsonFileProductRepository(str(data_file))


@pytest.fixture
def memory_repo():
    return InMemoryProductRepository()


@pytest_asyncio.fixture
async def test_client(file_repo, images_dir):
    """
    HTTPX AsyncClient configured to talk to our FastAPI app.

    The repository dependency is overridden with a repository over the
    per-test data file, so every test starts from an empty collection.
    """
    from product_catalog.main import app

    app.dependency_overrides[get_repository] = lambda: file_repo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
