"""Candidate URL resolution for infra research API paths.

A resolver maps a logical path such as `/api/models/research` to the ordered
list of fully-qualified URLs worth trying. The default resolver joins the path
onto every configured base URL; callers may plug in any callable with the same
shape.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from infra_research.core.config import settings

TargetResolver = Callable[[str], Sequence[str]]

API_PREFIX = "/api"


def _join(base: str, path: str) -> str:
    base = base.strip().rstrip("/")
    if not path.startswith("/"):
        path = f"/{path}"
    # Bases already mounted under /api must not produce /api/api/...
    if base.endswith(API_PREFIX) and path.startswith(f"{API_PREFIX}/"):
        path = path[len(API_PREFIX) :]
    return f"{base}{path}"


def build_api_targets(path: str, base_urls: Optional[Sequence[str]] = None) -> List[str]:
    """Return candidate URLs for `path`, ordered by base URL preference."""

    if path.startswith(("http://", "https://")):
        return [path]

    bases = settings.infra_api_base_urls if base_urls is None else base_urls
    targets: List[str] = []
    seen: set[str] = set()
    for base in bases:
        if not base or not base.strip():
            continue
        url = _join(base, path)
        if url in seen:
            continue
        seen.add(url)
        targets.append(url)
    return targets


def static_resolver(base_urls: Sequence[str]) -> TargetResolver:
    """Bind `build_api_targets` to a fixed list of base URLs."""

    bases = list(base_urls)

    def resolve(path: str) -> List[str]:
        return build_api_targets(path, bases)

    return resolve


__all__ = ["API_PREFIX", "TargetResolver", "build_api_targets", "static_resolver"]
