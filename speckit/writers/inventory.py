"""Human-readable inventory (inventory.md)."""

from __future__ import annotations

from datetime import datetime
from typing import List

from ..models import ExtractResult
from .base import ArtifactWriter, format_timestamp

NONE_DETECTED = "_None detected_"
NO_SUMMARY = "_No summary_"


class InventoryWriter(ArtifactWriter):
    """Renders routes, components and endpoints as Markdown tables."""

    filename = "inventory.md"

    def render(self, result: ExtractResult, extracted_at: datetime) -> str:
        lines: List[str] = [
            "# Codebase Inventory",
            "",
            f"**Extracted:** {format_timestamp(extracted_at)}",
            "",
        ]

        lines.extend(["## Next.js Routes", ""])
        if not result.routes:
            lines.append(NONE_DETECTED)
        else:
            lines.append("| Path | Kind | File |")
            lines.append("|------|------|------|")
            for route in result.routes:
                lines.append(f"| {route.path} | {route.kind.value} | `{route.file}` |")
        lines.append("")

        lines.extend(["## React Components", ""])
        if not result.components:
            lines.append(NONE_DETECTED)
        else:
            lines.append("| Name | File |")
            lines.append("|------|------|")
            for component in result.components:
                lines.append(f"| {component.name} | `{component.file}` |")
        lines.append("")

        lines.extend(["## API Endpoints", ""])
        if not result.apis:
            lines.append(NONE_DETECTED)
        else:
            lines.append("| Method | Path | Summary |")
            lines.append("|--------|------|---------|")
            for api in result.apis:
                lines.append(f"| {api.method} | {api.path} | {api.summary or NO_SUMMARY} |")
        lines.append("")

        return "\n".join(lines)


__all__ = ["InventoryWriter", "NONE_DETECTED"]
