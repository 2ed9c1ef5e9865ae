"""Reconciliation checklist (tasks.md), appended on every run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

from ..models import ExtractResult
from .base import ArtifactWriter, format_timestamp


@dataclass
class ExistingDocument:
    """Contents of a previously written artifact, if there was one."""

    found: bool
    text: str = ""


def read_if_exists(path: Path) -> ExistingDocument:
    if not path.is_file():
        return ExistingDocument(found=False)
    return ExistingDocument(found=True, text=path.read_text(encoding="utf-8"))


class ChecklistWriter(ArtifactWriter):
    """Appends a timestamped review block for every extracted entity."""

    filename = "tasks.md"

    def render(self, result: ExtractResult, extracted_at: datetime) -> str:
        lines: List[str] = [
            f"## Extraction Reconciliation - {format_timestamp(extracted_at)}",
            "",
            "### Routes to Review",
            "",
        ]
        if not result.routes:
            lines.append("- [ ] No routes detected")
        for route in result.routes:
            lines.append(f"- [ ] Verify route `{route.path}` (`{route.file}`) matches spec")

        lines.extend(["", "### Components to Review", ""])
        if not result.components:
            lines.append("- [ ] No components detected")
        for component in result.components:
            lines.append(
                f"- [ ] Verify component `{component.name}` (`{component.file}`) is documented"
            )

        lines.extend(["", "### API Endpoints to Review", ""])
        if not result.apis:
            lines.append("- [ ] No API endpoints detected")
        for api in result.apis:
            lines.append(f"- [ ] Verify endpoint {api.method} `{api.path}` is documented")

        lines.extend(["", "---", ""])
        return "\n".join(lines)

    def write(self, result: ExtractResult, output_dir: Path, extracted_at: datetime) -> Path:
        target = output_dir / self.filename
        block = self.render(result, extracted_at)
        existing = read_if_exists(target)
        content = f"{existing.text}\n{block}" if existing.found else block
        target.write_text(content, encoding="utf-8")
        return target


__all__ = ["ChecklistWriter", "ExistingDocument", "read_if_exists"]
