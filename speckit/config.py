"""Configuration loading for speckit (.speckit.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .models import RouteKind

CONFIG_FILENAME = ".speckit.yml"

DEFAULT_INPUT = "./src"
DEFAULT_OUTPUT_DIR = "packages/specs/active/extracted"

BASE_PROJECT = "project"
BASE_INPUT = "input"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class RoutePattern:
    """Discovery glob for route files and the kind its matches carry."""

    pattern: str
    kind: RouteKind


@dataclass(frozen=True)
class CandidateSpec:
    """Configured OpenAPI location, relative to the project or input root."""

    base: str
    path: str


DEFAULT_ROUTE_PATTERNS: tuple[RoutePattern, ...] = (
    RoutePattern("app/**/page.{ts,tsx,js,jsx}", RouteKind.PAGE),
    RoutePattern("app/**/route.{ts,tsx,js,jsx}", RouteKind.ROUTE),
)

DEFAULT_COMPONENT_PATTERNS: tuple[str, ...] = (
    "components/**/*.{tsx,jsx}",
    "ui/**/*.{tsx,jsx}",
    "shared/**/*.{tsx,jsx}",
)

DEFAULT_EXCLUDE_PATHS: tuple[str, ...] = (
    "node_modules/",
    "__pycache__/",
)

DEFAULT_OPENAPI_CANDIDATES: tuple[CandidateSpec, ...] = (
    CandidateSpec(BASE_PROJECT, "apps/api/openapi.json"),
    CandidateSpec(BASE_PROJECT, "public/openapi.json"),
    CandidateSpec(BASE_INPUT, "openapi.json"),
)


@dataclass
class SpecKitConfig:
    """Represents the settings defined in .speckit.yml."""

    root: Path
    input_path: str = DEFAULT_INPUT
    output_dir: str = DEFAULT_OUTPUT_DIR
    exclude_paths: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATHS))
    route_patterns: List[RoutePattern] = field(
        default_factory=lambda: list(DEFAULT_ROUTE_PATTERNS)
    )
    component_patterns: List[str] = field(
        default_factory=lambda: list(DEFAULT_COMPONENT_PATTERNS)
    )
    openapi_candidates: List[CandidateSpec] = field(
        default_factory=lambda: list(DEFAULT_OPENAPI_CANDIDATES)
    )


def load_config(config_path: Path) -> SpecKitConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SpecKitConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = SpecKitConfig(root=root)

    input_path = _as_str(data.get("input"))
    if input_path:
        config.input_path = input_path
    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = output_dir
    if data.get("exclude_paths") is not None:
        config.exclude_paths = _as_str_list(data["exclude_paths"])

    routes_data = _as_dict(data.get("routes"))
    if routes_data.get("patterns") is not None:
        config.route_patterns = _parse_route_patterns(routes_data["patterns"])

    components_data = _as_dict(data.get("components"))
    if components_data.get("patterns") is not None:
        config.component_patterns = _as_str_list(components_data["patterns"])

    openapi_data = _as_dict(data.get("openapi"))
    if openapi_data.get("candidates") is not None:
        config.openapi_candidates = _parse_candidates(openapi_data["candidates"])

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_route_patterns(value: Any) -> List[RoutePattern]:
    if not isinstance(value, list):
        raise ConfigError("routes.patterns must be a list")
    patterns: List[RoutePattern] = []
    for item in value:
        if not isinstance(item, dict):
            raise ConfigError("routes.patterns entries must be mappings with pattern and kind")
        pattern = _as_str(item.get("pattern"))
        kind = _as_str(item.get("kind"))
        if not pattern:
            raise ConfigError("routes.patterns entries require a pattern")
        try:
            route_kind = RouteKind(kind or RouteKind.PAGE.value)
        except ValueError as exc:
            raise ConfigError(f"Unknown route kind '{kind}' for pattern {pattern}") from exc
        patterns.append(RoutePattern(pattern, route_kind))
    return patterns


def _parse_candidates(value: Any) -> List[CandidateSpec]:
    if not isinstance(value, list):
        raise ConfigError("openapi.candidates must be a list")
    candidates: List[CandidateSpec] = []
    for item in value:
        if not isinstance(item, dict):
            raise ConfigError("openapi.candidates entries must be mappings with base and path")
        base = _as_str(item.get("base")) or BASE_PROJECT
        path = _as_str(item.get("path"))
        if base not in (BASE_PROJECT, BASE_INPUT):
            raise ConfigError(f"Unknown OpenAPI candidate base '{base}'")
        if not path:
            raise ConfigError("openapi.candidates entries require a path")
        candidates.append(CandidateSpec(base, path))
    return candidates


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return str(value)


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(item).strip() for item in value if str(item).strip()]
    if isinstance(value, str):
        stripped = value.strip()
        return [stripped] if stripped else []
    return []
