"""Pipeline step wiring.

Every step is a coroutine taking the package and a shared context, so the
orchestrator can await each one before the next begins, whether the work
underneath blocks on a subprocess or runs on the event loop.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Tuple

from rich.console import Console

from monobuild.core.config import BuildConfig
from monobuild.core.models import Package, SizeReport
from monobuild.modules.bundle.rollup import Bundler, bundle_package
from monobuild.modules.compile.compiler import compile_package
from monobuild.modules.size.report import report_size


@dataclass(frozen=True)
class StepContext:
    config: BuildConfig
    bundler: Bundler
    console: Optional[Console] = None


StepFunc = Callable[[Package, StepContext], Awaitable[Any]]


async def run_compile(package: Package, ctx: StepContext) -> int:
    return await asyncio.to_thread(compile_package, package, ctx.config, ctx.console)


async def run_bundle(package: Package, ctx: StepContext) -> Optional[Path]:
    return await bundle_package(package, ctx.config, ctx.bundler)


async def run_size_report(package: Package, ctx: StepContext) -> Optional[SizeReport]:
    return report_size(package, ctx.config, ctx.console)


PIPELINE: Tuple[Tuple[str, StepFunc], ...] = (
    ("compile", run_compile),
    ("bundle", run_bundle),
    ("size", run_size_report),
)
