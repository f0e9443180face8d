"""Package manifest (package.json) loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from monobuild.adapters.storage.repositories import read_json
from monobuild.core.errors import ManifestError
from monobuild.core.models import Package

LOG = logging.getLogger(__name__)

DEFAULT_MANIFEST_NAME = "package.json"


class Manifest(BaseModel):
    """The package.json fields the pipeline reads.

    Values are taken as found; a field of an unexpected type is treated as
    unset rather than rejected.
    """

    model_config = ConfigDict(extra="allow")

    name: Optional[Any] = None
    version: Optional[Any] = None
    main: Optional[Any] = None
    module: Optional[Any] = None
    browser: Optional[Any] = None

    @property
    def bundle_target(self) -> Optional[str]:
        # An object-valued browser field is an alias map, not an output path.
        if isinstance(self.browser, str) and self.browser.strip():
            return self.browser
        return None

    def display_name(self, fallback: str) -> str:
        if isinstance(self.name, str) and self.name.strip():
            return self.name
        return fallback


def load_manifest(package_root: Path, manifest_name: str = DEFAULT_MANIFEST_NAME) -> Optional[Manifest]:
    path = package_root / manifest_name
    if not path.is_file():
        LOG.debug("No manifest at %s", path)
        return None
    try:
        payload = read_json(path)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    return Manifest.model_validate(payload)


def load_package(package_root: Path, manifest_name: str = DEFAULT_MANIFEST_NAME) -> Package:
    return Package(root=package_root, manifest=load_manifest(package_root, manifest_name))
