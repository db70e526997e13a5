"""Typed results returned by the infra model research API.

Wire names are camelCase; attributes are snake_case. List fields are tuples
so a decoded result keeps the server's order and cannot be mutated after
receipt.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        frozen=True,
        extra="ignore",
        protected_namespaces=(),
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        # Servers send null for fields they could not fill
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class GlobalUseCase(_WireModel):
    country: str = ""
    project: str = ""
    application: str = ""
    evidence_note: str = ""


class MaterialRecord(_WireModel):
    name: str = ""
    specification: str = ""
    availability_in_pakistan: str = ""


class Availability(_WireModel):
    readiness_pakistan: str = ""
    local_supply_potential: str = ""
    import_dependency_note: str = ""


class Resilience(_WireModel):
    flood: str = ""
    earthquake: str = ""
    flood_score: float = 0.0
    earthquake_score: float = 0.0


class SearchHints(_WireModel):
    """Ready-made web search queries plus short display hints."""

    global_query: str = Field(default="", alias="global")
    pakistan_query: str = Field(default="", alias="pakistan")
    global_hint: str = ""
    pakistan_hint: str = ""


class InfraResearchResult(_WireModel):
    model_name: str = ""
    overview: str = ""
    global_use_cases: Tuple[GlobalUseCase, ...] = ()
    pakistan_use_cases: Tuple[str, ...] = ()
    features: Tuple[str, ...] = ()
    materials: Tuple[MaterialRecord, ...] = ()
    availability: Availability = Field(default_factory=Availability)
    resilience: Resilience = Field(default_factory=Resilience)
    source_links: Tuple[str, ...] = ()
    google_search: SearchHints = Field(default_factory=SearchHints)


class InfraResearchImage(_WireModel):
    view: str = ""
    image_data_url: str = ""

    def decode(self) -> tuple[str, bytes]:
        """Split a `data:<mime>;base64,<payload>` URL into mime type and bytes."""

        header, sep, data = self.image_data_url.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            raise ValueError(f"Image for view '{self.view}' is not a base64 data URL")
        mime_type = header[len("data:") : -len(";base64")] or "application/octet-stream"
        try:
            return mime_type, base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"Image for view '{self.view}' has invalid base64 data") from exc


class InfraResearchImageSet(_WireModel):
    images: Tuple[InfraResearchImage, ...] = ()


class StructuralDesignReport(_WireModel):
    summary: str = ""
    design_assumptions: Tuple[str, ...] = ()
    structural_system: str = ""
    foundation_system: str = ""
    load_path_and_lateral_system: str = ""
    material_specifications: Tuple[str, ...] = ()
    preliminary_member_sizing: Tuple[str, ...] = ()
    flood_resilience_measures: Tuple[str, ...] = ()
    earthquake_resilience_measures: Tuple[str, ...] = ()
    construction_materials_boq: Tuple[str, ...] = Field(default=(), alias="constructionMaterialsBOQ")
    rate_and_cost_notes: Tuple[str, ...] = ()
    code_and_compliance_checks: Tuple[str, ...] = ()
    limitations: Tuple[str, ...] = ()
    generated_at: str = ""


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
