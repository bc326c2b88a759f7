"""Unit tests for the questionnaire domain catalog."""
import pytest

from copsoq.core.domain_catalog import (
    DOMAIN_DEFINITIONS,
    RESPONSE_SCALE,
    build_domains,
    get_catalog,
    get_domains,
    item_text,
    scale_value,
)
from copsoq.models.catalog import category_for_number, item_number
from copsoq.models.enums import CascadeCategory, DomainType, JobLevel


def test_domains_ordered_and_unique():
    ids = [d.id for d in get_domains()]
    assert ids == sorted(ids)
    assert ids == list(range(1, 11))


def test_catalog_has_seventy_items():
    catalog = get_catalog()
    assert catalog.total_items() == 70

    item_ids = [item.id for d in catalog.get_domains() for item in d.items]
    assert len(set(item_ids)) == 70


def test_domain_types_are_configured():
    catalog = get_catalog()
    assert catalog.get_domain(1).type == DomainType.NEGATIVE
    assert catalog.get_domain(2).type == DomainType.POSITIVE


def test_domain_meta_table():
    meta = get_catalog().domain_meta()
    assert set(meta) == set(range(1, 11))
    assert meta[1].name == "Demandas no Trabalho"


def test_find_domain_for_item():
    catalog = get_catalog()
    assert catalog.find_domain_for_item("Q1").id == 1
    assert catalog.find_domain_for_item("Q999") is None
    assert catalog.get_domain(42) is None


def test_management_wording_substitution(small_catalog):
    item = small_catalog.get_domain(1).items[0]

    assert item_text(item, JobLevel.MANAGEMENT) == "Volume elevado de trabalho?"
    assert item_text(item, JobLevel.OPERATIONAL) == "Muito serviço?"


def test_management_falls_back_to_operational_text(small_catalog):
    item = small_catalog.get_domain(1).items[1]
    assert item_text(item, JobLevel.MANAGEMENT) == "Não dá conta?"


def test_domains_for_level(small_catalog):
    domains = small_catalog.domains_for_level(JobLevel.MANAGEMENT)
    assert domains[1]["items"][1]["text"] == "Desenvolve novas competências?"


def test_response_scale():
    assert scale_value("Sempre") == 100
    assert scale_value("Às vezes") == 50
    assert scale_value("Talvez") is None
    assert sorted(RESPONSE_SCALE.values()) == [0, 25, 50, 75, 100]


def test_duplicate_definitions_rejected():
    with pytest.raises(ValueError, match="Duplicate domain id"):
        build_domains([DOMAIN_DEFINITIONS[0], DOMAIN_DEFINITIONS[0]])


def test_item_numbering_helpers():
    assert item_number("Q59") == 59
    assert item_number("X") is None
    assert category_for_number(12) == CascadeCategory.CORE
    assert category_for_number(60) == CascadeCategory.BEHAVIORAL
    assert category_for_number(70) == CascadeCategory.FINANCIAL
    assert category_for_number(71) is None


def test_items_know_their_cascade_category():
    gambling = get_catalog().find_domain_for_item("Q60")
    item = next(i for i in gambling.items if i.id == "Q60")

    assert item.number == 60
    assert item.category == CascadeCategory.BEHAVIORAL
    assert get_catalog().get_domain(1).items[0].category == CascadeCategory.CORE
