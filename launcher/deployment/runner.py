"""Run the deployment tool in the foreground and report its exit status."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from launcher.config import EXIT_NOT_FOUND, EXIT_SIGNAL_BASE
from launcher.deployment.command import DeployCommand
from launcher.errors import LauncherError

logger = logging.getLogger(__name__)


class ToolNotFoundError(LauncherError):
    """Raised when the deployment tool executable cannot be found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"{executable}: command not found", EXIT_NOT_FOUND)
        self.executable = executable


def run_command(command: DeployCommand, cwd: str | Path | None = None) -> int:
    """Run *command* to completion and return its exit status.

    Standard streams are inherited, so the tool's output reaches the
    terminal as it is produced.  A tool killed by signal N reports
    ``128 + N``, as a shell would.

    On Ctrl-C the tool receives SIGINT from the terminal along with the
    launcher; it is waited for so it can finish its own interrupt
    handling, then :class:`KeyboardInterrupt` propagates.
    """
    if not command.argv:
        raise ValueError("empty command")

    logger.info("%s", command.trace())
    try:
        proc = subprocess.Popen(command.argv, cwd=cwd)
    except FileNotFoundError as exc:
        raise ToolNotFoundError(command.executable) from exc

    try:
        returncode = proc.wait()
    except KeyboardInterrupt:
        proc.wait()
        raise

    if returncode < 0:
        logger.error("%s killed by signal %d", command.executable, -returncode)
        return EXIT_SIGNAL_BASE - returncode
    if returncode != 0:
        logger.error("%s exited with status %d", command.executable, returncode)
    else:
        logger.debug("%s finished", command.executable)
    return returncode
