"""Route discovery for App Router style layouts."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Sequence

from ..config import DEFAULT_ROUTE_PATTERNS, RoutePattern
from ..discovery import DiscoveryScanner
from ..logging import get_logger
from ..models import RouteHit
from .paths import derive_route_path, normalize_web_path, terminal_marker

logger = get_logger("extractors.routes")


class RouteExtractor:
    """Turns route files matched by discovery patterns into route hits."""

    def __init__(
        self,
        scanner: DiscoveryScanner | None = None,
        patterns: Sequence[RoutePattern] = DEFAULT_ROUTE_PATTERNS,
    ) -> None:
        self.scanner = scanner or DiscoveryScanner()
        self.patterns = list(patterns)

    def extract(self, root: Path) -> List[RouteHit]:
        routes: List[RouteHit] = []
        for route_pattern in self.patterns:
            for relative in self.scanner.glob(root, route_pattern.pattern):
                file = normalize_web_path(relative)
                routes.append(
                    RouteHit(
                        path=derive_route_path(str(root / relative), str(root)),
                        file=file,
                        kind=terminal_marker(file) or route_pattern.kind,
                    )
                )
        logger.debug("Derived %d routes under %s", len(routes), root)
        return routes


def find_collisions(routes: Sequence[RouteHit]) -> Dict[str, List[str]]:
    """Return canonical paths served by more than one file, in discovery order."""
    files_by_path: Dict[str, List[str]] = defaultdict(list)
    for route in routes:
        files_by_path[route.path].append(route.file)
    return {path: files for path, files in files_by_path.items() if len(files) > 1}


__all__ = ["RouteExtractor", "find_collisions"]
