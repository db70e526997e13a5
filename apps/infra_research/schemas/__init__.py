"""Pydantic schemas for infra research API results."""

from .infra_research import (
    Availability,
    GlobalUseCase,
    InfraResearchImage,
    InfraResearchImageSet,
    InfraResearchResult,
    MaterialRecord,
    Resilience,
    SearchHints,
    StructuralDesignReport,
)

__all__ = [
    "Availability",
    "GlobalUseCase",
    "InfraResearchImage",
    "InfraResearchImageSet",
    "InfraResearchResult",
    "MaterialRecord",
    "Resilience",
    "SearchHints",
    "StructuralDesignReport",
]
