"""TypeScript compilation for a single package."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console

from monobuild.adapters.process.runner import check_returncode, run_command
from monobuild.core.config import BuildConfig
from monobuild.core.models import Package


def compiler_args(config: BuildConfig) -> List[str]:
    return ["-p", config.compiler_config]


def compile_package(package: Package, config: BuildConfig, console: Optional[Console] = None) -> int:
    args = compiler_args(config)
    returncode = run_command(config.compiler_bin, args, package.root, console)
    if config.fail_on_error:
        check_returncode([str(config.compiler_bin), *args], returncode)
    return returncode
