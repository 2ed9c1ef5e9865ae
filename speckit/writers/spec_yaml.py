"""Structured spec document (spec.yaml)."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

import yaml

from ..models import ExtractResult
from .base import ArtifactWriter, format_timestamp

SPEC_VERSION = "1.0.0"


class SpecWriter(ArtifactWriter):
    """Serializes the extraction result as YAML."""

    filename = "spec.yaml"

    def build(self, result: ExtractResult, extracted_at: datetime) -> Dict[str, Any]:
        return {
            "version": SPEC_VERSION,
            "extracted": format_timestamp(extracted_at),
            "routes": [
                {"path": route.path, "file": route.file, "kind": route.kind.value}
                for route in result.routes
            ],
            "components": [
                {"name": component.name, "file": component.file}
                for component in result.components
            ],
            "api": {
                "endpoints": [
                    {"method": api.method, "path": api.path, "summary": api.summary or None}
                    for api in result.apis
                ],
            },
        }

    def render(self, result: ExtractResult, extracted_at: datetime) -> str:
        return yaml.safe_dump(
            self.build(result, extracted_at),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=float("inf"),
        )


__all__ = ["SPEC_VERSION", "SpecWriter"]
