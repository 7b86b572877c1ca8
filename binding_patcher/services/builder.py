# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Invocation of the external native build tool (node-gyp).
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import BUILD_COMMAND, BUILD_TIMEOUT

logger = logging.getLogger(__name__)

# Lines of build tool stderr kept in BuildError messages.
STDERR_TAIL_LINES = 20


class BuildError(RuntimeError):
    """Raised when the native build tool exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = ""):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command '{shlex.join(self.command)}' exited with status {returncode}"
        tail = "\n".join(stderr.strip().splitlines()[-STDERR_TAIL_LINES:])
        if tail:
            message = f"{message}:\n{tail}"
        super().__init__(message)


def run_native_build(
    cwd: Path,
    command: Optional[Sequence[str]] = None,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """
    Rebuild the native binding of the dependency at *cwd*.

    Output of the build tool is captured, never forwarded to our own
    stdout/stderr.

    Args:
        cwd: Dependency root, used as the working directory
        command: Build command, defaults to BUILD_COMMAND
        timeout: Seconds before the build is killed, defaults to BUILD_TIMEOUT

    Returns:
        The completed process

    Raises:
        BuildError: If the build tool exits non-zero
        subprocess.TimeoutExpired: If the build exceeds the timeout
        OSError: If the build tool cannot be started
    """
    cmd: List[str] = list(command or BUILD_COMMAND)
    limit = BUILD_TIMEOUT if timeout is None else timeout

    logger.debug(f"Running {shlex.join(cmd)} in {cwd} (timeout {limit}s)")
    result = subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=True,
        text=True,
        timeout=limit,
    )
    if result.returncode != 0:
        raise BuildError(cmd, result.returncode, result.stderr or "")
    return result


def manual_build_hint(cwd: Path, command: Optional[Sequence[str]] = None) -> str:
    """Return the shell line a user can run to build the binding by hand."""
    cmd = list(command or BUILD_COMMAND)
    return f"cd {shlex.quote(str(cwd))} && {shlex.join(cmd)}"
