"""Async client for the infra model research API.

Every operation POSTs a JSON body to a logical path. The path is resolved to
an ordered list of candidate URLs; candidates are tried one after another
until one answers with anything other than 404. That response is then decoded
into the operation's result model.

Retry behavior:
    None beyond the candidate fallback. Transport failures and 404s advance to
    the next candidate; any other status (including 5xx) is final.

Failure handling model:
    Errors are raised as `InfraApiError` subclasses and never logged above
    DEBUG here; presenting them is the caller's job.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from infra_research.connectors.api_targets import TargetResolver, build_api_targets, static_resolver
from infra_research.core.config import settings
from infra_research.core.exceptions import (
    ApplicationError,
    InfraApiError,
    NetworkError,
    RequestFailedError,
    ResponseDecodeError,
    RouteNotFoundError,
    raw_snippet,
)
from infra_research.schemas.infra_research import (
    InfraResearchImageSet,
    InfraResearchResult,
    StructuralDesignReport,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_HEADERS = {"Content-Type": "application/json"}

RESEARCH_PATH = "/api/models/research"
RESEARCH_IMAGES_PATH = "/api/models/research-images"
STRUCTURAL_REPORT_PATH = "/api/models/structural-design-report"

RESEARCH_FAILED = "Infra model research failed"
RESEARCH_IMAGES_FAILED = "Infra model view image generation failed"
STRUCTURAL_REPORT_FAILED = "Structural design report generation failed"
REQUEST_FAILED = "Infra research API request failed"


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


async def post_json_with_fallback(
    client: httpx.AsyncClient,
    path: str,
    payload: Dict[str, Any],
    resolver: TargetResolver = build_api_targets,
) -> httpx.Response:
    """POST `payload` to each candidate for `path` until one is not a 404.

    Candidates are attempted strictly in order. The first response whose
    status is not 404 is returned as-is, whatever its status. When every
    candidate fails, the most recent failure is raised with the attempted
    targets attached to `details`.
    """

    targets: Sequence[str] = resolver(path)
    attempted: List[str] = []
    last_error: Optional[InfraApiError] = None

    for target in targets:
        attempted.append(target)
        try:
            response = await client.post(target, json=payload, headers=JSON_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("Infra API request to %s failed: %s", target, exc)
            last_error = NetworkError(str(exc), target=target)
            last_error.__cause__ = exc
            continue

        if response.status_code != 404:
            return response

        logger.debug("Infra API route %s not found on %s; trying next target", path, target)
        last_error = RouteNotFoundError(target)

    if last_error is None:
        raise RequestFailedError(REQUEST_FAILED, details={"path": path, "attempted_targets": []})

    last_error.details = {"path": path, "attempted_targets": attempted}
    raise last_error


async def decode_json_response(
    response: httpx.Response,
    fallback: str,
    result_type: Optional[Type[ModelT]] = None,
) -> Any:
    """Read `response` once and turn it into a result or a raised error.

    Args:
        response: The accepted (non-404) response from the dispatcher.
        fallback: Operation-specific message used when the server gives none.
        result_type: Optional model to validate a successful body into. When
            omitted the parsed JSON value is returned unchanged.

    Raises:
        ResponseDecodeError: body is not JSON, or does not fit `result_type`.
        ApplicationError: failure status with a JSON body.
    """

    await response.aread()
    raw = response.text.removeprefix("\ufeff")
    status = response.status_code

    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        if response.is_success:
            message = f"{fallback}: invalid JSON response."
        else:
            message = f"{fallback}: non-JSON response ({status})."
        raise ResponseDecodeError(
            message, status_code=status, details={"raw": raw_snippet(raw)}
        ) from exc

    if not response.is_success:
        error = body.get("error") if isinstance(body, dict) else None
        message = error if isinstance(error, str) and error else fallback
        raise ApplicationError(message, status_code=status, details=body)

    if result_type is None:
        return body

    try:
        return result_type.model_validate(body)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"{fallback}: unexpected response shape.",
            status_code=status,
            details={"errors": exc.errors(include_url=False), "raw": raw_snippet(raw)},
        ) from exc


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


class InfraApiClient:
    """Client for the three infra research operations.

    Holds only configuration; each call opens its own `httpx.AsyncClient`, so
    one instance can be shared by concurrent callers.
    """

    def __init__(
        self,
        base_urls: Optional[Sequence[str]] = None,
        *,
        resolver: Optional[TargetResolver] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if resolver is None:
            resolver = static_resolver(base_urls) if base_urls is not None else build_api_targets
        self.resolver = resolver
        self.timeout = timeout if timeout is not None else settings.infra_api_timeout
        self._transport = transport

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        )

    async def _call(
        self,
        path: str,
        payload: Dict[str, Any],
        fallback: str,
        result_type: Type[ModelT],
    ) -> ModelT:
        async with self._http_client() as client:
            response = await post_json_with_fallback(client, path, _compact(payload), self.resolver)
            return await decode_json_response(response, fallback, result_type)

    async def research_model(
        self, model_name: str, province: Optional[str] = None
    ) -> InfraResearchResult:
        payload = {"modelName": model_name, "province": province}
        return await self._call(RESEARCH_PATH, payload, RESEARCH_FAILED, InfraResearchResult)

    async def generate_research_images(
        self, model_name: str, province: Optional[str] = None
    ) -> InfraResearchImageSet:
        payload = {"modelName": model_name, "province": province}
        return await self._call(
            RESEARCH_IMAGES_PATH, payload, RESEARCH_IMAGES_FAILED, InfraResearchImageSet
        )

    async def generate_structural_design_report(
        self,
        model_name: str,
        location: str,
        stories: int,
        intended_use: str,
        geo_tech_report: Optional[str] = None,
    ) -> StructuralDesignReport:
        payload = {
            "modelName": model_name,
            "location": location,
            "geoTechReport": geo_tech_report,
            "stories": stories,
            "intendedUse": intended_use,
        }
        return await self._call(
            STRUCTURAL_REPORT_PATH, payload, STRUCTURAL_REPORT_FAILED, StructuralDesignReport
        )


__all__ = [
    "InfraApiClient",
    "JSON_HEADERS",
    "RESEARCH_FAILED",
    "RESEARCH_IMAGES_FAILED",
    "RESEARCH_IMAGES_PATH",
    "RESEARCH_PATH",
    "STRUCTURAL_REPORT_FAILED",
    "STRUCTURAL_REPORT_PATH",
    "decode_json_response",
    "post_json_with_fallback",
]
