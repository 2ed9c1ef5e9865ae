"""Web path derivation for App Router style source layouts."""

from __future__ import annotations

import os
import posixpath
import re
from typing import Optional

from ..models import RouteKind

_SOURCE_SUFFIX = re.compile(r"\.(tsx?|jsx?)$")
_ROUTE_GROUP = re.compile(r"(?<![^/])\([^/)]+\)/")
_REPEATED_SEPARATORS = re.compile(r"/+")

_APP_PREFIX = "app/"
_ROOT_PARENTS = {"", ".", "app"}


def normalize_web_path(path: str) -> str:
    """Return ``path`` with every backslash separator turned into ``/``."""
    return path.replace("\\", "/")


def _relative_source(file_path: str, root: Optional[str]) -> str:
    relative = os.path.relpath(file_path, root) if root is not None else file_path
    relative = normalize_web_path(relative)
    relative = _SOURCE_SUFFIX.sub("", relative)
    if relative.startswith(_APP_PREFIX):
        relative = relative[len(_APP_PREFIX):]
    return _ROUTE_GROUP.sub("", relative)


def _parent_web_path(path: str) -> str:
    parent = posixpath.dirname(path)
    if parent in _ROOT_PARENTS:
        return "/"
    return "/" + parent


def terminal_marker(file_path: str, root: Optional[str] = None) -> Optional[RouteKind]:
    """Return the route kind named by the file's terminal segment, if any."""
    relative = _relative_source(file_path, root)
    if relative.endswith("/page"):
        return RouteKind.PAGE
    if relative.endswith("/route"):
        return RouteKind.ROUTE
    return None


def derive_route_path(file_path: str, root: Optional[str] = None) -> str:
    """Map a route source file onto its canonical web path.

    ``file_path`` is taken relative to ``root`` when one is given. Extensions,
    the leading ``app/`` directory and ``(group)`` segments are removed, then
    the terminal ``page``/``route`` file resolves to its parent directory. Any
    other file resolves to the directory that contains it.

    The result always starts with ``/``, never contains ``//`` and only ends
    with ``/`` when it is the root itself.
    """
    relative = _relative_source(file_path, root)

    # page, route and fallback files all resolve to their directory.
    web_path = _parent_web_path(relative)

    if not web_path.startswith("/"):
        web_path = "/" + web_path
    web_path = _REPEATED_SEPARATORS.sub("/", web_path)
    if len(web_path) > 1 and web_path.endswith("/"):
        web_path = web_path[:-1]
    return web_path


def derive_component_name(file_path: str) -> str:
    """Return the component name for a file: its basename without extension."""
    basename = posixpath.basename(normalize_web_path(file_path))
    stem, _ = posixpath.splitext(basename)
    return stem


__all__ = [
    "derive_component_name",
    "derive_route_path",
    "normalize_web_path",
    "terminal_marker",
]
