"""Configuration helpers for the monorepo layout and tool locations."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

ROOT_MARKERS = ("package.json", "pyproject.toml")
FALSE_VALUES = {"0", "false", "no", "off"}

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildConfig:
    root: Path
    packages_dir: Path
    compiler_bin: Path
    bundler_bin: Path
    compiler_config: str = "tsconfig.json"
    standalone_entry: str = "build/standalone.js"
    manifest_name: str = "package.json"
    gzip_level: int = 9
    fail_on_error: bool = True

    @staticmethod
    def from_root(root: Path) -> "BuildConfig":
        root = root.resolve()
        bin_dir = root / "node_modules" / ".bin"
        return BuildConfig(
            root=root,
            packages_dir=root / "packages",
            compiler_bin=bin_dir / "tsc",
            bundler_bin=bin_dir / "rollup",
        )


def resolve_repo_root() -> Path:
    env_root = os.getenv("MONOBUILD_ROOT")
    if env_root:
        return Path(env_root)
    cwd = Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        if any((parent / marker).exists() for marker in ROOT_MARKERS):
            return parent
    return cwd


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in FALSE_VALUES


def _gzip_level(raw: str, default: int) -> int:
    try:
        return max(1, min(9, int(raw)))
    except ValueError:
        LOG.warning("Ignoring MONOBUILD_GZIP_LEVEL=%r, using %s", raw, default)
        return default


def load_config(
    packages_dir: Optional[Path] = None,
    root: Optional[Path] = None,
) -> BuildConfig:
    config = BuildConfig.from_root(root or resolve_repo_root())

    env_packages = os.getenv("MONOBUILD_PACKAGES_DIR")
    if packages_dir is not None:
        config = replace(config, packages_dir=Path(packages_dir).resolve())
    elif env_packages:
        config = replace(config, packages_dir=Path(env_packages).resolve())

    tsc_bin = os.getenv("MONOBUILD_TSC_BIN")
    if tsc_bin:
        config = replace(config, compiler_bin=Path(tsc_bin))
    rollup_bin = os.getenv("MONOBUILD_ROLLUP_BIN")
    if rollup_bin:
        config = replace(config, bundler_bin=Path(rollup_bin))

    level = os.getenv("MONOBUILD_GZIP_LEVEL")
    if level:
        config = replace(config, gzip_level=_gzip_level(level, config.gzip_level))

    return replace(config, fail_on_error=_env_flag("MONOBUILD_STRICT", config.fail_on_error))
