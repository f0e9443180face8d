"""CLI entry point for the monorepo build orchestrator."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from monobuild.core.config import load_config
from monobuild.core.errors import LaunchError, PackageNotFoundError
from monobuild.pipeline.orchestrator import Orchestrator
from monobuild.ui.console import get_console

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="monobuild", description="Build every package of a monorepo")
    parser.add_argument("package", nargs="?", help="Build only this package (default: all packages)")
    parser.add_argument("--packages-dir", type=Path, default=None, help="Directory holding the packages")
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Keep going when the compiler exits with a non-zero status",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config(packages_dir=args.packages_dir)
    if args.no_strict:
        config = replace(config, fail_on_error=False)

    orchestrator = Orchestrator(config=config)
    try:
        reports = orchestrator.run_sync(args.package)
    except LaunchError as exc:
        LOG.debug("Aborting build: %s", exc)
        return 1
    except PackageNotFoundError as exc:
        get_console().print(f"error: {exc}", style="bold red", markup=False, soft_wrap=True)
        return 1

    failed = [report for report in reports if not report.ok]
    for report in failed:
        step = report.failed_step
        get_console().print(
            f"{report.package}: {step.name if step else 'build'} failed",
            style="red",
            markup=False,
            soft_wrap=True,
        )
    return 1 if failed else 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
