"""Glob-based discovery of convention-named source files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from fnmatch import fnmatchcase
from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import DEFAULT_EXCLUDE_PATHS
from .logging import get_logger

logger = get_logger("discovery")


@dataclass
class IgnoreRule:
    """Represents an exclude pattern from .speckit.yml."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return self.directory_only and rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


def _expand_braces(pattern: str) -> List[str]:
    """Expand ``{a,b}`` alternations, innermost groups included."""
    start = pattern.find("{")
    if start == -1:
        return [pattern]
    depth = 0
    for index in range(start, len(pattern)):
        char = pattern[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                break
    else:
        return [pattern]

    body = pattern[start + 1:index]
    options: List[str] = []
    depth = 0
    current = ""
    for char in body:
        if char == "," and depth == 0:
            options.append(current)
            current = ""
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        current += char
    options.append(current)

    prefix, suffix = pattern[:start], pattern[index + 1:]
    expanded: List[str] = []
    for option in options:
        expanded.extend(_expand_braces(f"{prefix}{option}{suffix}"))
    return expanded


def _translate(pattern: str) -> str:
    parts: List[str] = []
    index = 0
    while index < len(pattern):
        if pattern.startswith("**/", index):
            parts.append("(?:[^/]+/)*")
            index += 3
        elif pattern.startswith("**", index):
            parts.append(".*")
            index += 2
        elif pattern[index] == "*":
            parts.append("[^/]*")
            index += 1
        elif pattern[index] == "?":
            parts.append("[^/]")
            index += 1
        else:
            parts.append(re.escape(pattern[index]))
            index += 1
    return "".join(parts)


@lru_cache(maxsize=128)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob with ``**``, ``*``, ``?`` and ``{a,b}`` into a regex."""
    alternatives = [_translate(option) for option in _expand_braces(pattern)]
    return re.compile("^(?:" + "|".join(alternatives) + ")$")


class DiscoveryScanner:
    """Walks a source tree and returns files matching glob patterns."""

    def __init__(self, exclude_paths: Sequence[str] = DEFAULT_EXCLUDE_PATHS) -> None:
        rules = [build_ignore_rule(pattern) for pattern in exclude_paths]
        self._rules = [rule for rule in rules if rule is not None]

    def glob(self, root: Path, pattern: str) -> List[str]:
        """Return POSIX paths relative to ``root`` that match ``pattern``."""
        matcher = compile_glob(pattern)
        matches = [rel_path for rel_path in self._iter_files(root) if matcher.match(rel_path)]
        logger.debug("Pattern %s matched %d files", pattern, len(matches))
        return matches

    def glob_many(self, root: Path, patterns: Sequence[str]) -> List[str]:
        """Concatenate matches of each pattern in order, without deduplication."""
        results: List[str] = []
        for pattern in patterns:
            results.extend(self.glob(root, pattern))
        return results

    def _iter_files(self, root: Path) -> Iterator[str]:
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            kept_dirs = []
            for name in sorted(dirnames):
                if name.startswith("."):
                    continue
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if self._should_ignore(rel_path, True):
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for filename in sorted(filenames):
                if filename.startswith("."):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if self._should_ignore(rel_path, False):
                    continue
                yield rel_path

    def _should_ignore(self, rel_path: str, is_dir: bool) -> bool:
        return any(rule.matches(rel_path, is_dir) for rule in self._rules)


__all__ = ["DiscoveryScanner", "IgnoreRule", "build_ignore_rule", "compile_glob"]
