"""Tests for route and component extraction."""

from __future__ import annotations

from speckit.config import RoutePattern
from speckit.discovery import DiscoveryScanner
from speckit.extractors.components import ComponentExtractor
from speckit.extractors.routes import RouteExtractor, find_collisions
from speckit.models import ComponentHit, RouteHit, RouteKind
from tests._fixtures.repo_builder import RepoBuilder


def test_route_extractor_lists_pages_then_handlers(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(
        [
            "app/page.tsx",
            "app/(marketing)/about/page.tsx",
            "app/users/[id]/route.ts",
            "app/users/[id]/page.tsx",
            "app/layout.tsx",
        ]
    )

    routes = RouteExtractor().extract(repo_builder.path())

    assert routes == [
        RouteHit(path="/", file="app/page.tsx", kind=RouteKind.PAGE),
        RouteHit(path="/about", file="app/(marketing)/about/page.tsx", kind=RouteKind.PAGE),
        RouteHit(path="/users/[id]", file="app/users/[id]/page.tsx", kind=RouteKind.PAGE),
        RouteHit(path="/users/[id]", file="app/users/[id]/route.ts", kind=RouteKind.ROUTE),
    ]


def test_route_extractor_ignores_files_outside_app(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(["pages/index.tsx", "lib/page.ts", "app/page.css"])

    assert RouteExtractor().extract(repo_builder.path()) == []


def test_fallback_files_keep_pattern_kind(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(["app/settings/layout.tsx"])
    extractor = RouteExtractor(patterns=[RoutePattern("app/**/layout.tsx", RouteKind.PAGE)])

    routes = extractor.extract(repo_builder.path())

    assert routes == [RouteHit(path="/settings", file="app/settings/layout.tsx", kind=RouteKind.PAGE)]


def test_find_collisions_reports_shared_paths() -> None:
    routes = [
        RouteHit(path="/users", file="app/users/page.tsx", kind=RouteKind.PAGE),
        RouteHit(path="/users", file="app/(admin)/users/page.tsx", kind=RouteKind.PAGE),
        RouteHit(path="/", file="app/page.tsx", kind=RouteKind.PAGE),
    ]

    assert find_collisions(routes) == {
        "/users": ["app/users/page.tsx", "app/(admin)/users/page.tsx"],
    }


def test_component_extractor_keeps_duplicate_names(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(
        [
            "components/forms/Button.tsx",
            "components/Header.jsx",
            "ui/Button.tsx",
            "shared/modal/Modal.tsx",
            "components/utils.ts",
        ]
    )

    components = ComponentExtractor().extract(repo_builder.path())

    assert components == [
        ComponentHit(name="Header", file="components/Header.jsx"),
        ComponentHit(name="Button", file="components/forms/Button.tsx"),
        ComponentHit(name="Button", file="ui/Button.tsx"),
        ComponentHit(name="Modal", file="shared/modal/Modal.tsx"),
    ]


def test_component_extractor_honours_exclude_paths(repo_builder: RepoBuilder) -> None:
    repo_builder.touch(["components/Card.tsx", "components/legacy/OldCard.tsx"])
    scanner = DiscoveryScanner(exclude_paths=["components/legacy/"])

    components = ComponentExtractor(scanner).extract(repo_builder.path())

    assert [component.name for component in components] == ["Card"]
