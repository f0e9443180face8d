"""Synchronous external command execution with a reproducible trace."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from rich.console import Console

from monobuild.core.errors import CommandFailedError, LaunchError
from monobuild.ui.console import get_console, print_dim

LOG = logging.getLogger(__name__)

PathLike = Union[str, Path]


def format_trace(command: PathLike, args: Sequence[str], cwd: PathLike) -> str:
    return f"$ cd {cwd}\n$ {' '.join([str(command), *args])}"


def run_command(
    command: PathLike,
    args: Sequence[str],
    cwd: PathLike,
    console: Optional[Console] = None,
) -> int:
    """Run ``command`` in ``cwd`` with the caller's stdio and return its exit status.

    The child writes straight to our stdout/stderr, so its output shows up
    in real time and in the order it was produced. Only a failure to start
    the program is an error here; the exit status is left to the caller.
    """
    console = console or get_console()
    cmd: List[str] = [str(command), *args]
    print_dim(format_trace(command, args, cwd), console)
    console.file.flush()
    try:
        completed = subprocess.run(cmd, cwd=str(cwd), check=False)
    except OSError as exc:
        console.print(str(exc), markup=False, soft_wrap=True)
        print_dim("Error running command.", console)
        raise LaunchError(cmd, exc) from exc
    LOG.debug("%s exited with status %s", cmd[0], completed.returncode)
    return completed.returncode


def check_returncode(command: Sequence[str], returncode: int) -> None:
    if returncode != 0:
        raise CommandFailedError(command, returncode)
