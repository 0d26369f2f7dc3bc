"""Launcher — the single entry point for a deployment run.

Usage::

    from launcher import Launcher

    launcher = Launcher("/opt/deploy/deploy.py")
    status = launcher.launch(["--limit", "staging"])  # gitsha from the current directory
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from launcher.deployment.command import DeployCommand, build_command
from launcher.deployment.paths import DeployPaths, build_paths, resolve_script_dir
from launcher.deployment.preflight import PreflightChecker, PreflightReport
from launcher.deployment.runner import run_command
from launcher.settings import LauncherSettings, SettingsManager
from launcher.vcs.repo import RepoManager

logger = logging.getLogger(__name__)


class Launcher:
    """Resolve paths, read the revision and run the playbook.

    Parameters
    ----------
    script_path:
        Path of the launcher script; the deploy directory lives beside it.
    settings:
        Pre-loaded settings.  Loaded from the script directory when omitted.
    workdir:
        Directory whose checked-out revision is deployed.  Defaults to the
        current working directory at construction time.
    """

    def __init__(
        self,
        script_path: str | Path,
        settings: LauncherSettings | None = None,
        workdir: str | Path | None = None,
    ) -> None:
        self.script_dir = resolve_script_dir(script_path)
        self.settings = settings or SettingsManager().load(self.script_dir)
        self.paths: DeployPaths = build_paths(self.script_dir)
        self.repo = RepoManager(workdir if workdir is not None else Path.cwd(), git=self.settings.git)

    def current_commit(self) -> str:
        return self.repo.current_commit()

    def command(self, extra_args: Sequence[str] = ()) -> DeployCommand:
        """Build the command for the checked-out revision.

        Raises :class:`GitError` if the revision cannot be read.
        """
        commit = self.current_commit()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Deploying %s (%s)", commit, self.repo.current_branch())
        return build_command(
            commit,
            self.paths,
            extra_args,
            executable=self.settings.ansible_playbook,
            ask_become_pass=self.settings.ask_become_pass,
        )

    def launch(self, extra_args: Sequence[str] = ()) -> int:
        """Run the deployment and return the tool's exit status."""
        command = self.command(extra_args)
        return run_command(command)

    def preflight(self) -> PreflightReport:
        checker = PreflightChecker(self.settings.ansible_playbook, git=self.settings.git)
        return checker.check(self.paths, repo_dir=self.repo.path)
