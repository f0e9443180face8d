"""Pipeline orchestrator for monorepo package builds."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from rich.console import Console

from monobuild.adapters.storage.repositories import list_directories
from monobuild.core.config import BuildConfig, load_config
from monobuild.adapters.io.manifest import load_package
from monobuild.core.errors import LaunchError, ManifestError, MonobuildError, PackageNotFoundError
from monobuild.core.models import Package
from monobuild.modules.bundle.rollup import Bundler, RollupBundler
from monobuild.pipeline.results import PackageReport, StepReport
from monobuild.pipeline.steps import PIPELINE, StepContext
from monobuild.ui.console import print_banner

LOG = logging.getLogger(__name__)

BANNER = "Building packages"


def discover_packages(config: BuildConfig) -> List[Package]:
    if not config.packages_dir.is_dir():
        raise PackageNotFoundError(f"packages directory {config.packages_dir} does not exist")
    return [Package(root=path) for path in list_directories(config.packages_dir)]


class Orchestrator:
    def __init__(
        self,
        config: BuildConfig | None = None,
        bundler: Bundler | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or load_config()
        self.bundler = bundler or RollupBundler(self.config.bundler_bin)
        self.console = console
        self.reports: List[PackageReport] = []

    @property
    def context(self) -> StepContext:
        return StepContext(config=self.config, bundler=self.bundler, console=self.console)

    def resolve_package(self, name: str) -> Package:
        root = (self.config.packages_dir / name).absolute()
        if not root.is_dir():
            raise PackageNotFoundError(f"no package named {name!r} under {self.config.packages_dir}")
        return Package(root=root)

    async def build_package(self, package: Package) -> PackageReport:
        report = PackageReport(package=package.name)
        try:
            package = load_package(package.root, self.config.manifest_name)
        except ManifestError as exc:
            LOG.error("%s: %s", package.name, exc)
            report.steps.append(StepReport(name="manifest", ok=False, message=str(exc)))
            return report
        ctx = self.context
        for name, step in PIPELINE:
            try:
                payload = await step(package, ctx)
            except LaunchError:
                report.steps.append(StepReport(name=name, ok=False, message="launch failed"))
                raise
            except (MonobuildError, OSError) as exc:
                LOG.error("%s: %s step failed: %s", package.name, name, exc)
                report.steps.append(StepReport(name=name, ok=False, message=str(exc)))
                break
            report.steps.append(StepReport(name=name, ok=True, skipped=payload is None, payload=payload))
        return report

    async def run(self, package_name: Optional[str] = None) -> List[PackageReport]:
        self.reports.clear()
        if package_name:
            packages = [self.resolve_package(package_name)]
        else:
            packages = discover_packages(self.config)
            print_banner(BANNER, self.console)
        for package in packages:
            LOG.info("Building %s", package.root)
            self.reports.append(await self.build_package(package))
        return list(self.reports)

    def run_sync(self, package_name: Optional[str] = None) -> List[PackageReport]:
        return asyncio.run(self.run(package_name))
