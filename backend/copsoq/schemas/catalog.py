"""Catalog response schemas."""

from pydantic import BaseModel

from copsoq.models.enums import DomainType


class CatalogItem(BaseModel):
    """Item with the wording resolved for the respondent's job level."""

    id: str
    text: str


class CatalogDomain(BaseModel):
    id: int
    title: str
    name: str
    description: str
    type: DomainType
    items: list[CatalogItem]


class CatalogResponse(BaseModel):
    """Response schema for the questionnaire catalog."""

    version: str
    total_items: int
    scale: dict[str, int]
    domains: list[CatalogDomain]
