"""FastAPI dependencies providing the engine components."""
from functools import lru_cache

from copsoq.core.config import get_settings
from copsoq.core.domain_catalog import DomainCatalog, get_catalog
from copsoq.services.cascade_service import CascadeResolver
from copsoq.services.results_service import ResultsService


def get_domain_catalog() -> DomainCatalog:
    """Catalog dependency; override in tests to inject a smaller catalog."""
    return get_catalog()


@lru_cache
def get_cascade_resolver() -> CascadeResolver:
    """Resolver built once from the configured rule table."""
    return CascadeResolver()


@lru_cache
def get_results_service() -> ResultsService:
    """Results service using the configured required answer count."""
    settings = get_settings()
    return ResultsService(get_catalog(), required_count=settings.required_answer_count)
