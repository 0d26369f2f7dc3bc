"""Version control — read revision state from the launcher's git work tree."""

from launcher.vcs.repo import GitError, RepoManager

__all__ = ["GitError", "RepoManager"]
