"""Client for the infra model research, image and structural report API."""

from infra_research.connectors.infra_api import InfraApiClient
from infra_research.core.exceptions import (
    ApplicationError,
    InfraApiError,
    NetworkError,
    RequestFailedError,
    ResponseDecodeError,
    RouteNotFoundError,
)
from infra_research.services.infra_models import (
    generate_infra_model_research_images,
    generate_structural_design_report,
    research_infra_model,
)

__all__ = [
    "ApplicationError",
    "InfraApiClient",
    "InfraApiError",
    "NetworkError",
    "RequestFailedError",
    "ResponseDecodeError",
    "RouteNotFoundError",
    "generate_infra_model_research_images",
    "generate_structural_design_report",
    "research_infra_model",
]
