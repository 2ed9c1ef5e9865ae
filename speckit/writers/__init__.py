"""Artifact writers rendering one extraction result three ways."""

from __future__ import annotations

from typing import List

from .base import ArtifactWriter, format_timestamp
from .checklist import ChecklistWriter
from .inventory import InventoryWriter
from .spec_yaml import SpecWriter


def default_writers() -> List[ArtifactWriter]:
    return [SpecWriter(), InventoryWriter(), ChecklistWriter()]


__all__ = [
    "ArtifactWriter",
    "ChecklistWriter",
    "InventoryWriter",
    "SpecWriter",
    "default_writers",
    "format_timestamp",
]
