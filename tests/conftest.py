# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds applications on a throwaway SQLite file or an in-memory store
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment on import

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from lib.store import InMemoryProductStore

FRONTEND_URL = "http://localhost:5173"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def database_url(tmp_path):
    """URL of an empty SQLite database file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'products.db'}"


@pytest.fixture
def settings(database_url):
    """Settings pointing at the temporary database."""
    return Settings(
        DATABASE_URL=database_url,
        FRONTEND_URL=FRONTEND_URL,
        ENVIRONMENT="development",
    )


@pytest.fixture
def client(settings):
    """TestClient on a SQL-backed app; the lifespan creates the tables."""
    app = create_app(settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def memory_store():
    """Empty in-memory product store."""
    return InMemoryProductStore()


@pytest.fixture
def memory_client(settings, memory_store):
    """TestClient on an app backed by the in-memory store."""
    app = create_app(settings=settings, store=memory_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_product():
    """Valid body for creating a product."""
    return {"name": "Mouse - testing", "price": 150}


@pytest.fixture
def created_product(client, sample_product):
    """A product created through the API; returns its JSON."""
    response = client.post("/api/products", json=sample_product)
    assert response.status_code == 201
    return response.json()["data"]
