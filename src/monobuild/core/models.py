"""Shared domain models for the build pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from monobuild.adapters.io.manifest import Manifest


@dataclass(frozen=True)
class Package:
    root: Path
    manifest: Optional["Manifest"] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        return self.root.name


@dataclass(frozen=True)
class BundleOptions:
    input_file: Path
    output_file: Path
    module_name: str
    format: str = "cjs"
    exports: str = "named"
    main_fields: Tuple[str, ...] = ("module", "jsnext:main", "main")
    browser: bool = True
    commonjs: bool = True
    minify: bool = True


@dataclass(frozen=True)
class SizeReport:
    name: str
    path: Path
    compressed_bytes: int

    @property
    def kilobytes(self) -> float:
        return self.compressed_bytes / 1024

    def render(self) -> str:
        return f"{self.name}: {format_kilobytes(self.compressed_bytes)} kB"


def format_kilobytes(size_bytes: int) -> str:
    # Same rendering as awk's default numeric output format (%.6g).
    return f"{size_bytes / 1024:.6g}"

