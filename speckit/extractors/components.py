"""UI component inventory discovery."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from ..config import DEFAULT_COMPONENT_PATTERNS
from ..discovery import DiscoveryScanner
from ..models import ComponentHit
from .paths import derive_component_name, normalize_web_path


class ComponentExtractor:
    """Lists component files under the conventional component directories."""

    def __init__(
        self,
        scanner: DiscoveryScanner | None = None,
        patterns: Sequence[str] = DEFAULT_COMPONENT_PATTERNS,
    ) -> None:
        self.scanner = scanner or DiscoveryScanner()
        self.patterns = list(patterns)

    def extract(self, root: Path) -> List[ComponentHit]:
        return [
            ComponentHit(name=derive_component_name(relative), file=normalize_web_path(relative))
            for relative in self.scanner.glob_many(root, self.patterns)
        ]


__all__ = ["ComponentExtractor"]
