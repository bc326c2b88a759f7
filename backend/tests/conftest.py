"""Pytest fixtures for testing."""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("ENVIRONMENT", "development")

from copsoq.api.deps import get_domain_catalog, get_results_service
from copsoq.core.domain_catalog import DomainCatalog, build_domains, get_catalog
from copsoq.main import app
from copsoq.models.enums import DomainType
from copsoq.services.results_service import ResultsService

SMALL_CATALOG_DEFINITIONS = [
    {
        "id": 1,
        "name": "Demandas no Trabalho",
        "type": DomainType.NEGATIVE,
        "items": [
            ("Q1", "Muito serviço?", "Volume elevado de trabalho?"),
            ("Q2", "Não dá conta?", None),
        ],
    },
    {
        "id": 2,
        "name": "Organização e Conteúdo do Trabalho",
        "type": DomainType.POSITIVE,
        "items": [
            ("Q3", "Tem autonomia?", None),
            ("Q4", "Aprende coisas novas?", "Desenvolve novas competências?"),
        ],
    },
]


def full_answers(value: int = 50, catalog: DomainCatalog | None = None) -> list[dict]:
    """One answer per catalog item, shaped like the stored rows."""
    catalog = catalog or get_catalog()
    return [
        {"grupo": domain.id, "item": item.id, "valor": value}
        for domain in catalog.get_domains()
        for item in domain.items
    ]


@pytest.fixture()
def catalog() -> DomainCatalog:
    return get_catalog()


@pytest.fixture()
def small_catalog() -> DomainCatalog:
    """Four-item catalog with one domain of each type."""
    return DomainCatalog(build_domains(SMALL_CATALOG_DEFINITIONS))


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client against the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def small_client(small_catalog: DomainCatalog) -> AsyncGenerator[AsyncClient, None]:
    """Test client whose endpoints use the four-item catalog."""
    app.dependency_overrides[get_domain_catalog] = lambda: small_catalog
    app.dependency_overrides[get_results_service] = lambda: ResultsService(small_catalog)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture()
def make_answers():
    """Factory for one answer row per catalog item."""
    return full_answers
