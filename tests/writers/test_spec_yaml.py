"""Tests for speckit.writers.spec_yaml."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import yaml

from speckit.models import ApiEndpoint, ComponentHit, ExtractResult, RouteHit, RouteKind
from speckit.writers.spec_yaml import SpecWriter


def test_spec_writer_keeps_empty_sections(tmp_path: Path, extracted_at: datetime) -> None:
    path = SpecWriter().write(ExtractResult(), tmp_path, extracted_at)

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data == {
        "version": "1.0.0",
        "extracted": "2024-05-01T12:30:45.123Z",
        "routes": [],
        "components": [],
        "api": {"endpoints": []},
    }


def test_spec_writer_preserves_order_and_null_summary(extracted_at: datetime) -> None:
    result = ExtractResult(
        routes=[
            RouteHit(path="/zeta", file="app/zeta/page.tsx", kind=RouteKind.PAGE),
            RouteHit(path="/alpha", file="app/alpha/route.ts", kind=RouteKind.ROUTE),
        ],
        components=[ComponentHit(name="Nav", file="components/Nav.tsx")],
        apis=[
            ApiEndpoint(method="POST", path="/users"),
            ApiEndpoint(method="GET", path="/users", summary="List users"),
        ],
    )

    text = SpecWriter().render(result, extracted_at)
    data = yaml.safe_load(text)

    assert list(data) == ["version", "extracted", "routes", "components", "api"]
    assert [route["path"] for route in data["routes"]] == ["/zeta", "/alpha"]
    assert data["routes"][1] == {"path": "/alpha", "file": "app/alpha/route.ts", "kind": "route"}
    assert data["components"] == [{"name": "Nav", "file": "components/Nav.tsx"}]
    assert data["api"]["endpoints"] == [
        {"method": "POST", "path": "/users", "summary": None},
        {"method": "GET", "path": "/users", "summary": "List users"},
    ]
    assert "summary: null" in text


def test_spec_writer_does_not_wrap_long_values(extracted_at: datetime) -> None:
    summary = "word " * 40
    result = ExtractResult(apis=[ApiEndpoint(method="GET", path="/long", summary=summary.strip())])

    text = SpecWriter().render(result, extracted_at)

    assert summary.strip() in text
