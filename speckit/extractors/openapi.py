"""OpenAPI document discovery and endpoint extraction."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from ..config import BASE_INPUT, DEFAULT_OPENAPI_CANDIDATES, CandidateSpec
from ..logging import get_logger
from ..models import ApiEndpoint

HTTP_METHODS = frozenset({"get", "post", "put", "patch", "delete", "head", "options"})

logger = get_logger("extractors.openapi")


@dataclass(frozen=True)
class OpenAPICandidate:
    """A location that may hold an OpenAPI JSON document."""

    base: Path
    relative: str

    @property
    def location(self) -> Path:
        return self.base / self.relative


class LoadStatus(str, Enum):
    FOUND = "found"
    MISSING = "missing"
    INVALID = "invalid"


@dataclass
class OpenAPILoadOutcome:
    """Result of probing a single candidate."""

    candidate: OpenAPICandidate
    status: LoadStatus
    endpoints: List[ApiEndpoint] = field(default_factory=list)
    reason: Optional[str] = None


def resolve_candidates(
    project_root: Path,
    input_root: Path,
    specs: Sequence[CandidateSpec] = DEFAULT_OPENAPI_CANDIDATES,
) -> List[OpenAPICandidate]:
    """Bind configured candidate locations to concrete base directories."""
    return [
        OpenAPICandidate(
            base=input_root if spec.base == BASE_INPUT else project_root,
            relative=spec.path,
        )
        for spec in specs
    ]


def parse_endpoints(document: Any) -> Optional[List[ApiEndpoint]]:
    """Return endpoints from a decoded document, or None when it has no paths map."""
    if not isinstance(document, dict):
        return None
    paths = document.get("paths")
    if not isinstance(paths, dict):
        return None

    endpoints: List[ApiEndpoint] = []
    for api_path, operations in paths.items():
        if not isinstance(operations, dict):
            continue
        for method, operation in operations.items():
            if not isinstance(method, str) or method.lower() not in HTTP_METHODS:
                continue
            summary = operation.get("summary") if isinstance(operation, dict) else None
            endpoints.append(
                ApiEndpoint(
                    method=method.upper(),
                    path=str(api_path),
                    summary=summary if isinstance(summary, str) and summary else None,
                )
            )
    return endpoints


class OpenAPILoader:
    """Loads endpoints from the first candidate holding a usable document."""

    def probe(self, candidate: OpenAPICandidate) -> OpenAPILoadOutcome:
        location = candidate.location
        if not location.is_file():
            return OpenAPILoadOutcome(candidate, LoadStatus.MISSING)
        try:
            document = json.loads(location.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            return OpenAPILoadOutcome(candidate, LoadStatus.INVALID, reason=str(exc))

        endpoints = parse_endpoints(document)
        if endpoints is None:
            return OpenAPILoadOutcome(
                candidate, LoadStatus.INVALID, reason="document has no paths mapping"
            )
        return OpenAPILoadOutcome(candidate, LoadStatus.FOUND, endpoints=endpoints)

    def load(self, candidates: Iterable[OpenAPICandidate]) -> List[ApiEndpoint]:
        for candidate in candidates:
            outcome = self.probe(candidate)
            if outcome.status is LoadStatus.FOUND:
                logger.debug(
                    "Loaded %d endpoints from %s", len(outcome.endpoints), candidate.location
                )
                return outcome.endpoints
            if outcome.status is LoadStatus.INVALID:
                logger.debug("Skipping %s: %s", candidate.location, outcome.reason)
        return []


__all__ = [
    "HTTP_METHODS",
    "LoadStatus",
    "OpenAPICandidate",
    "OpenAPILoadOutcome",
    "OpenAPILoader",
    "parse_endpoints",
    "resolve_candidates",
]
