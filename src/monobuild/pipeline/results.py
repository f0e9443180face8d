"""Pipeline step results and diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class StepReport:
    name: str
    ok: bool
    skipped: bool = False
    message: Optional[str] = None
    payload: Optional[Any] = None


@dataclass
class PackageReport:
    package: str
    steps: List[StepReport] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(step.ok for step in self.steps)

    @property
    def failed_step(self) -> Optional[StepReport]:
        return next((step for step in self.steps if not step.ok), None)

    def step(self, name: str) -> Optional[StepReport]:
        return next((step for step in self.steps if step.name == name), None)
