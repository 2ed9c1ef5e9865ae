"""Extractors that turn a source tree into routes, components and endpoints."""

from __future__ import annotations

from .components import ComponentExtractor
from .openapi import OpenAPICandidate, OpenAPILoader, resolve_candidates
from .paths import derive_component_name, derive_route_path, normalize_web_path, terminal_marker
from .routes import RouteExtractor, find_collisions

__all__ = [
    "ComponentExtractor",
    "OpenAPICandidate",
    "OpenAPILoader",
    "RouteExtractor",
    "derive_component_name",
    "derive_route_path",
    "find_collisions",
    "normalize_web_path",
    "resolve_candidates",
    "terminal_marker",
]
