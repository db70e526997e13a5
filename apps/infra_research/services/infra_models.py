"""Infra model research operations.

Thin async wrappers over `InfraApiClient` so callers can do

    result = await research_infra_model("Ferrocement Housing", province="Sindh")

without wiring a client themselves. Errors from the client propagate
unchanged.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from infra_research.connectors.infra_api import InfraApiClient
from infra_research.schemas.infra_research import (
    InfraResearchImageSet,
    InfraResearchResult,
    StructuralDesignReport,
)


@lru_cache(maxsize=1)
def get_infra_api_client() -> InfraApiClient:
    """Return a process-wide client configured from settings."""

    return InfraApiClient()


async def research_infra_model(
    model_name: str,
    province: Optional[str] = None,
    *,
    client: Optional[InfraApiClient] = None,
) -> InfraResearchResult:
    api = client or get_infra_api_client()
    return await api.research_model(model_name, province)


async def generate_infra_model_research_images(
    model_name: str,
    province: Optional[str] = None,
    *,
    client: Optional[InfraApiClient] = None,
) -> InfraResearchImageSet:
    api = client or get_infra_api_client()
    return await api.generate_research_images(model_name, province)


async def generate_structural_design_report(
    model_name: str,
    location: str,
    stories: int,
    intended_use: str,
    geo_tech_report: Optional[str] = None,
    *,
    client: Optional[InfraApiClient] = None,
) -> StructuralDesignReport:
    api = client or get_infra_api_client()
    return await api.generate_structural_design_report(
        model_name,
        location,
        stories,
        intended_use,
        geo_tech_report=geo_tech_report,
    )


__all__ = [
    "generate_infra_model_research_images",
    "generate_structural_design_report",
    "get_infra_api_client",
    "research_infra_model",
]
