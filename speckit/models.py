"""Core data models shared across speckit components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class RouteKind(str, Enum):
    """Terminal marker a route file carries."""

    PAGE = "page"
    ROUTE = "route"


@dataclass(frozen=True)
class RouteHit:
    """A discovered route file and the web path it serves."""

    path: str
    file: str
    kind: RouteKind


@dataclass(frozen=True)
class ComponentHit:
    """A discovered UI component file."""

    name: str
    file: str


@dataclass(frozen=True)
class ApiEndpoint:
    """An operation listed in an OpenAPI document."""

    method: str
    path: str
    summary: Optional[str] = None


@dataclass
class ExtractResult:
    """Everything one extraction run found, in discovery order."""

    routes: List[RouteHit] = field(default_factory=list)
    components: List[ComponentHit] = field(default_factory=list)
    apis: List[ApiEndpoint] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return {
            "routes": len(self.routes),
            "components": len(self.components),
            "apis": len(self.apis),
        }
