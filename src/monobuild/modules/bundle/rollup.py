"""Single-file browser bundles built with rollup."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Protocol

from monobuild.adapters.storage.repositories import ensure_dir
from monobuild.core.config import BuildConfig
from monobuild.core.errors import BundleError
from monobuild.core.models import BundleOptions, Package

LOG = logging.getLogger(__name__)


class Bundler(Protocol):
    async def bundle(self, options: BundleOptions) -> None:
        ...


class RollupBundler:
    def __init__(self, bin_path: Path) -> None:
        self.bin_path = bin_path

    def build_args(self, options: BundleOptions) -> List[str]:
        fields = ", ".join(f"'{name}'" for name in options.main_fields)
        browser = "true" if options.browser else "false"
        args = [
            "--input",
            str(options.input_file),
            "--file",
            str(options.output_file),
            "--format",
            options.format,
            "--name",
            options.module_name,
            "--exports",
            options.exports,
            "--plugin",
            f"node-resolve={{browser: {browser}, mainFields: [{fields}]}}",
        ]
        if options.commonjs:
            args += ["--plugin", "commonjs"]
        if options.minify:
            args += ["--plugin", "terser"]
        args.append("--silent")
        return args

    async def bundle(self, options: BundleOptions) -> None:
        cmd = [str(self.bin_path), *self.build_args(options)]
        LOG.debug("Bundling %s -> %s", options.input_file, options.output_file)
        try:
            process = await asyncio.create_subprocess_exec(*cmd, stderr=asyncio.subprocess.PIPE)
        except OSError as exc:
            raise BundleError(f"could not launch bundler {cmd[0]!r}: {exc}") from exc
        _, stderr = await process.communicate()
        detail = stderr.decode("utf-8", errors="replace").strip() if stderr else ""
        if process.returncode != 0:
            raise BundleError(f"bundler exited with status {process.returncode}: {detail}")
        if detail:
            LOG.warning("%s: %s", options.module_name, detail)


def bundle_options(package: Package, config: BuildConfig, target: str) -> BundleOptions:
    return BundleOptions(
        input_file=package.root / config.standalone_entry,
        output_file=(package.root / target).resolve(),
        module_name=package.name,
    )


async def bundle_package(package: Package, config: BuildConfig, bundler: Bundler) -> Optional[Path]:
    manifest = package.manifest
    if manifest is None or manifest.bundle_target is None:
        return None
    options = bundle_options(package, config, manifest.bundle_target)
    ensure_dir(options.output_file.parent)
    await bundler.bundle(options)
    return options.output_file
