"""RepoManager — query revision state of the launcher's git work tree.

All git operations use :func:`subprocess.run`; no GitPython dependency.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from launcher.config import EXIT_NOT_FOUND
from launcher.errors import LauncherError

logger = logging.getLogger(__name__)


class GitError(LauncherError):
    """Raised when a git subprocess fails or git itself cannot be run."""


def _run_git(
    *args: str,
    cwd: str | Path | None = None,
    check: bool = True,
    git: str = "git",
) -> subprocess.CompletedProcess[str]:
    """Execute a git command via subprocess and return the result.

    Parameters
    ----------
    *args:
        Arguments passed after ``git``.
    cwd:
        Working directory for the command.
    check:
        If *True*, raise :class:`GitError` on non-zero exit.
    git:
        Name or path of the git executable.
    """
    cmd = [git, *args]
    logger.debug("git %s (cwd=%s)", " ".join(args), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise GitError(f"git executable not found: {git}", EXIT_NOT_FOUND) from exc
    if check and result.returncode != 0:
        raise GitError(
            f"git {' '.join(args)} failed (rc={result.returncode}): "
            f"{result.stderr.strip()}",
            result.returncode,
        )
    return result


class RepoManager:
    """Read-only view of a git work tree.

    Parameters
    ----------
    path:
        Any directory inside the work tree.  git walks up to the root.
    git:
        Name or path of the git executable.
    """

    def __init__(self, path: str | Path, git: str = "git") -> None:
        self.path = Path(path).resolve()
        self.git = git

    def is_repo(self) -> bool:
        """Return *True* if *self.path* is inside a git work tree."""
        if not self.path.is_dir():
            return False
        try:
            result = _run_git(
                "rev-parse", "--is-inside-work-tree",
                cwd=self.path,
                check=False,
                git=self.git,
            )
        except GitError:
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def current_commit(self) -> str:
        """Return the full hash of the checked-out revision.

        Every whitespace character is stripped from git's output, not just
        the trailing newline.
        """
        result = _run_git("rev-parse", "HEAD", cwd=self.path, git=self.git)
        sha = "".join(result.stdout.split())
        if not sha:
            raise GitError("git rev-parse HEAD returned no revision")
        return sha

    def current_branch(self) -> str:
        """Return the name of the current branch (``HEAD`` when detached)."""
        result = _run_git("rev-parse", "--abbrev-ref", "HEAD", cwd=self.path, git=self.git)
        return result.stdout.strip()

    def status(self) -> str:
        """Return the output of ``git status --porcelain``."""
        result = _run_git("status", "--porcelain", cwd=self.path, git=self.git)
        return result.stdout

    def is_clean(self) -> bool:
        """Return *True* if the working tree has no uncommitted changes."""
        return self.status().strip() == ""
