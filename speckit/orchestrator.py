"""Pipeline orchestration for the extract flow."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from .config import SpecKitConfig, load_config
from .discovery import DiscoveryScanner
from .extractors import (
    ComponentExtractor,
    OpenAPILoader,
    RouteExtractor,
    find_collisions,
    resolve_candidates,
)
from .logging import get_logger
from .models import ExtractResult
from .writers import ArtifactWriter, default_writers


@dataclass
class ExtractOutcome:
    """Result of an extract run."""

    result: ExtractResult
    extracted_at: datetime
    written: List[Path] = field(default_factory=list)
    collisions: Dict[str, List[str]] = field(default_factory=dict)
    dry_run: bool = False


class Orchestrator:
    """Coordinates discovery, derivation, OpenAPI loading and artifact writing."""

    def __init__(
        self,
        config: SpecKitConfig | None = None,
        openapi_loader: OpenAPILoader | None = None,
        writers: Optional[Iterable[ArtifactWriter]] = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config
        self.openapi_loader = openapi_loader or OpenAPILoader()
        self.writers = list(writers) if writers is not None else default_writers()
        self._clock = clock or (lambda: datetime.now(UTC))
        self.logger = get_logger("orchestrator")

    def run_extract(
        self,
        input_path: str | None = None,
        *,
        project_root: Path | None = None,
        output_dir: Path | None = None,
        dry_run: bool = False,
    ) -> ExtractOutcome:
        """Scan ``input_path`` and write the spec, inventory and checklist artifacts."""
        if project_root is None:
            project_root = self._config.root if self._config is not None else Path.cwd()
        project = project_root.expanduser().resolve()
        config = self._config or load_config(project)

        requested = input_path or config.input_path
        root = (project / Path(requested).expanduser()).resolve()
        if not root.exists():
            raise FileNotFoundError(f"Input path does not exist: {requested}")

        extracted_at = self._clock()
        self.logger.info("Scanning codebase in: %s", requested)

        result = self.extract(root, project, config)
        collisions = find_collisions(result.routes)
        for path, files in collisions.items():
            self.logger.warning("Route %s is derived from multiple files: %s", path, ", ".join(files))

        outcome = ExtractOutcome(
            result=result,
            extracted_at=extracted_at,
            collisions=collisions,
            dry_run=dry_run,
        )
        if dry_run:
            return outcome

        target_dir = project / (output_dir or Path(config.output_dir)).expanduser()
        target_dir = target_dir.resolve()
        target_dir.mkdir(parents=True, exist_ok=True)
        for writer in self.writers:
            path = writer.write(result, target_dir, extracted_at)
            self.logger.debug("Wrote %s", path)
            outcome.written.append(path)
        return outcome

    def extract(self, root: Path, project: Path, config: SpecKitConfig) -> ExtractResult:
        """Build the in-memory result for one source tree."""
        scanner = DiscoveryScanner(config.exclude_paths)
        routes = RouteExtractor(scanner, config.route_patterns).extract(root)
        components = ComponentExtractor(scanner, config.component_patterns).extract(root)
        candidates = resolve_candidates(project, root, config.openapi_candidates)
        apis = self.openapi_loader.load(candidates)
        self.logger.debug(
            "Found %d routes, %d components, %d endpoints",
            len(routes),
            len(components),
            len(apis),
        )
        return ExtractResult(routes=routes, components=components, apis=apis)


__all__ = ["ExtractOutcome", "Orchestrator"]
