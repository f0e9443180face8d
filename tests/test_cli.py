"""End-to-end tests for the command line entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from monobuild.ui import cli
from tests.conftest import make_package


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONOBUILD_ROOT", str(tmp_path))
    for key in ("MONOBUILD_PACKAGES_DIR", "MONOBUILD_TSC_BIN", "MONOBUILD_ROLLUP_BIN", "MONOBUILD_STRICT"):
        monkeypatch.delenv(key, raising=False)


def _fake_tsc(tmp_path: Path, exit_code: int) -> Path:
    script = tmp_path / "fake-tsc"
    script.write_text(f"#!{sys.executable}\nimport sys\nsys.exit({exit_code})\n", encoding="utf-8")
    script.chmod(0o755)
    return script


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args([])

    assert args.package is None
    assert args.packages_dir is None
    assert args.no_strict is False


def test_launch_failure_exits_with_one(
    packages_dir: Path, monkeypatch: pytest.MonkeyPatch, capfd: pytest.CaptureFixture[str]
) -> None:
    make_package(packages_dir, "alpha")
    make_package(packages_dir, "beta")
    monkeypatch.setenv("MONOBUILD_TSC_BIN", str(packages_dir / "does-not-exist"))

    code = cli.main(["--packages-dir", str(packages_dir)])

    out, _ = capfd.readouterr()
    assert code == 1
    assert "Error running command." in out
    assert str(packages_dir / "beta") not in out


def test_unknown_package_exits_with_one(packages_dir: Path, capfd: pytest.CaptureFixture[str]) -> None:
    make_package(packages_dir, "core")

    code = cli.main(["ghost", "--packages-dir", str(packages_dir)])

    out, _ = capfd.readouterr()
    assert code == 1
    assert "ghost" in out


@pytest.mark.skipif(sys.platform == "win32", reason="shebang scripts")
def test_successful_build(tmp_path: Path, packages_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    make_package(packages_dir, "core", {"name": "core"})
    monkeypatch.setenv("MONOBUILD_TSC_BIN", str(_fake_tsc(tmp_path, 0)))

    assert cli.main(["--packages-dir", str(packages_dir)]) == 0


@pytest.mark.skipif(sys.platform == "win32", reason="shebang scripts")
def test_compiler_errors_fail_the_run_unless_relaxed(
    tmp_path: Path, packages_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    make_package(packages_dir, "core", {"name": "core"})
    monkeypatch.setenv("MONOBUILD_TSC_BIN", str(_fake_tsc(tmp_path, 2)))

    assert cli.main(["core", "--packages-dir", str(packages_dir)]) == 1
    assert cli.main(["core", "--packages-dir", str(packages_dir), "--no-strict"]) == 0
