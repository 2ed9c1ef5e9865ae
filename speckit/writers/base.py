"""Base classes for artifact writers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import UTC, datetime
from pathlib import Path

from ..models import ExtractResult


def format_timestamp(moment: datetime) -> str:
    """Render an instant as UTC ISO-8601 with millisecond precision and ``Z``."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ArtifactWriter(ABC):
    """Contract for writers that render an extraction result to one file."""

    filename: str

    @abstractmethod
    def render(self, result: ExtractResult, extracted_at: datetime) -> str:
        """Return the artifact text for ``result``."""

    def write(self, result: ExtractResult, output_dir: Path, extracted_at: datetime) -> Path:
        """Render ``result`` and replace the artifact in ``output_dir``."""
        target = output_dir / self.filename
        target.write_text(self.render(result, extracted_at), encoding="utf-8")
        return target
