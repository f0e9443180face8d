"""Compressed size reporting for browser bundles."""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import Optional

from rich.console import Console

from monobuild.core.config import BuildConfig
from monobuild.core.errors import StepFailedError
from monobuild.core.models import Package, SizeReport
from monobuild.ui.console import print_dim


def gzip_size(path: Path, level: int = 9) -> int:
    data = path.read_bytes()
    return len(gzip.compress(data, compresslevel=level, mtime=0))


def report_size(
    package: Package,
    config: BuildConfig,
    console: Optional[Console] = None,
) -> Optional[SizeReport]:
    manifest = package.manifest
    if manifest is None or manifest.bundle_target is None:
        return None
    path = (package.root / manifest.bundle_target).resolve()
    if not path.is_file():
        raise StepFailedError(f"bundle output {path} does not exist")
    report = SizeReport(
        name=manifest.display_name(package.name),
        path=path,
        compressed_bytes=gzip_size(path, config.gzip_level),
    )
    print_dim(report.render(), console)
    return report
