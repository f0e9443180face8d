"""Pytest configuration and fixtures."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from rich.console import Console

from monobuild.core.config import BuildConfig
from monobuild.core.models import BundleOptions

BUNDLE_SOURCE = "exports.hello=function(){return'hello'};" * 40


def make_package(
    packages_dir: Path,
    name: str,
    manifest: Optional[Dict[str, Any]] = None,
    raw_manifest: Optional[str] = None,
) -> Path:
    root = packages_dir / name
    (root / "src").mkdir(parents=True)
    (root / "tsconfig.json").write_text("{}", encoding="utf-8")
    if manifest is not None:
        (root / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    elif raw_manifest is not None:
        (root / "package.json").write_text(raw_manifest, encoding="utf-8")
    return root


class FakeBundler:
    """Writes a fixed bundle after yielding to the event loop once."""

    def __init__(self, content: str = BUNDLE_SOURCE) -> None:
        self.content = content
        self.calls: List[BundleOptions] = []

    async def bundle(self, options: BundleOptions) -> None:
        import asyncio

        self.calls.append(options)
        await asyncio.sleep(0.01)
        options.output_file.write_text(self.content, encoding="utf-8")


@pytest.fixture
def packages_dir(tmp_path: Path) -> Path:
    path = tmp_path / "packages"
    path.mkdir()
    return path


@pytest.fixture
def config(tmp_path: Path, packages_dir: Path) -> BuildConfig:
    base = BuildConfig.from_root(tmp_path)
    return BuildConfig(
        root=base.root,
        packages_dir=packages_dir.resolve(),
        compiler_bin=base.compiler_bin,
        bundler_bin=base.bundler_bin,
    )


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(file=output, highlight=False, width=200)


@pytest.fixture
def bundler() -> FakeBundler:
    return FakeBundler()
