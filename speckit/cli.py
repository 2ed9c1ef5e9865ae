"""CLI entrypoint for speckit extraction."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator
from .writers import InventoryWriter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speckit-extract",
        description="Scan an existing codebase and generate spec.yaml, inventory.md and tasks.md.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to scan (defaults to the configured input, ./src).",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory for generated artifacts (defaults to packages/specs/active/extracted).",
    )
    parser.add_argument(
        "--project-root",
        default=None,
        help="Project root used for configuration and OpenAPI lookups (defaults to cwd).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a .speckit.yml file.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the inventory without writing any artifacts.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write detailed logs to this file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for speckit-extract."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    project_root = Path(args.project_root) if args.project_root else None
    try:
        config = load_config(Path(args.config) if args.config else project_root or Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"Error: {exc}\n")

    orchestrator = Orchestrator(config=config)
    try:
        outcome = orchestrator.run_extract(
            args.path,
            project_root=project_root,
            output_dir=Path(args.output_dir) if args.output_dir else None,
            dry_run=bool(args.dry_run),
        )
    except FileNotFoundError as exc:
        parser.exit(1, f"Error: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"speckit extract failed: {exc}\nRun with --verbose for more details.\n")

    counts = outcome.result.counts()
    print(
        f"Extracted {counts['routes']} routes, {counts['components']} components, "
        f"{counts['apis']} API endpoints."
    )
    if outcome.dry_run:
        print("")
        print(InventoryWriter().render(outcome.result, outcome.extracted_at))
        return

    print("")
    print("Written files:")
    for path in outcome.written:
        print(f"   {_relativize(path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
