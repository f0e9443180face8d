"""Custom exceptions for the monorepo build orchestrator."""

from __future__ import annotations

from typing import Sequence


class MonobuildError(Exception):
    """Base error for build failures."""


class LaunchError(MonobuildError):
    """Raised when an external program cannot be started at all."""

    def __init__(self, command: Sequence[str], cause: BaseException) -> None:
        self.command = list(command)
        self.cause = cause
        super().__init__(f"could not launch {self.command[0]!r}: {cause}")


class CommandFailedError(MonobuildError):
    """Raised when a launched program exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.command = list(command)
        self.returncode = returncode
        super().__init__(f"{' '.join(self.command)} exited with status {returncode}")


class ManifestError(MonobuildError):
    """Raised when a package manifest exists but cannot be parsed."""


class PackageNotFoundError(MonobuildError):
    """Raised when a requested package directory does not exist."""


class BundleError(MonobuildError):
    """Raised when the bundler fails to produce its output."""


class StepFailedError(MonobuildError):
    """Raised when a pipeline step fails."""
