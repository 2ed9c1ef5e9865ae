"""Tests for speckit.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from speckit.config import (
    DEFAULT_COMPONENT_PATTERNS,
    DEFAULT_EXCLUDE_PATHS,
    DEFAULT_OPENAPI_CANDIDATES,
    DEFAULT_ROUTE_PATTERNS,
    CandidateSpec,
    ConfigError,
    RoutePattern,
    SpecKitConfig,
    load_config,
)
from speckit.models import RouteKind


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SpecKitConfig)
    assert config.root == tmp_path.resolve()
    assert config.input_path == "./src"
    assert config.output_dir == "packages/specs/active/extracted"
    assert config.exclude_paths == list(DEFAULT_EXCLUDE_PATHS)
    assert config.route_patterns == list(DEFAULT_ROUTE_PATTERNS)
    assert config.component_patterns == list(DEFAULT_COMPONENT_PATTERNS)
    assert config.openapi_candidates == list(DEFAULT_OPENAPI_CANDIDATES)


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".speckit.yml"
    config_file.write_text(
        """
input: web
output_dir: specs/extracted
exclude_paths:
  - "legacy/"
routes:
  patterns:
    - pattern: "app/**/page.tsx"
      kind: page
    - pattern: "app/**/route.ts"
      kind: route
components:
  patterns: ["widgets/**/*.tsx"]
openapi:
  candidates:
    - base: input
      path: api/openapi.json
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.input_path == "web"
    assert config.output_dir == "specs/extracted"
    assert config.exclude_paths == ["legacy/"]
    assert config.route_patterns == [
        RoutePattern("app/**/page.tsx", RouteKind.PAGE),
        RoutePattern("app/**/route.ts", RouteKind.ROUTE),
    ]
    assert config.component_patterns == ["widgets/**/*.tsx"]
    assert config.openapi_candidates == [CandidateSpec("input", "api/openapi.json")]


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".speckit.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).input_path == "./src"


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "routes:\n  patterns:\n    - pattern: app/**/page.tsx\n      kind: layout\n",
        "openapi:\n  candidates:\n    - base: elsewhere\n      path: openapi.json\n",
        "routes: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_documents(tmp_path: Path, content: str) -> None:
    (tmp_path / ".speckit.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_can_clear_default_excludes(tmp_path: Path) -> None:
    (tmp_path / ".speckit.yml").write_text("exclude_paths: []\n", encoding="utf-8")

    assert load_config(tmp_path).exclude_paths == []


def test_load_config_root_is_config_directory(tmp_path: Path) -> None:
    nested = tmp_path / "configs"
    nested.mkdir()
    (nested / "custom.yml").write_text("input: web\n", encoding="utf-8")

    assert load_config(nested / "custom.yml").root == nested.resolve()
