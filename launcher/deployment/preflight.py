"""PreflightChecker — report whether a launch would find what it needs."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from pydantic import BaseModel, Field

from launcher.deployment.paths import DeployPaths
from launcher.vcs.repo import GitError, RepoManager

logger = logging.getLogger(__name__)


class CheckResult(BaseModel):
    """Result of a single preflight check."""

    name: str = ""
    passed: bool = True
    message: str = ""
    severity: str = "info"  # info, warning, critical


class PreflightReport(BaseModel):
    """Aggregate preflight report."""

    status: str = "ready"  # ready, degraded, blocked
    checks: list[CheckResult] = Field(default_factory=list)

    @property
    def failures(self) -> list[CheckResult]:
        return [c for c in self.checks if not c.passed]


class PreflightChecker:
    """Check the launcher's surroundings without running anything."""

    def __init__(self, executable: str, git: str = "git") -> None:
        self.executable = executable
        self.git = git

    def check(
        self,
        paths: DeployPaths,
        repo_dir: str | Path | None = None,
    ) -> PreflightReport:
        """Run all checks and return a report.

        *repo_dir* is where the revision is read; defaults to the launcher
        directory.
        """
        checks: list[CheckResult] = []

        # 1. Git work tree
        repo = RepoManager(repo_dir if repo_dir is not None else paths.script_dir, git=self.git)
        in_repo = repo.is_repo()
        if in_repo:
            try:
                message = f"Git work tree on {repo.current_branch()}"
            except GitError:
                message = "Git work tree has no commits yet"
                in_repo = False
        else:
            message = f"{repo.path} is not in a git work tree"
        checks.append(CheckResult(
            name="git_repo",
            passed=in_repo,
            message=message,
            severity="info" if in_repo else "critical",
        ))
        if in_repo and not repo.is_clean():
            checks.append(CheckResult(
                name="git_clean",
                passed=False,
                message="Working tree has uncommitted changes; gitsha will not describe them",
                severity="warning",
            ))

        # 2. Playbook and inventory
        checks.append(self._file_check("playbook", paths.playbook))
        checks.append(self._file_check("inventory", paths.inventory))

        # 3. Tool on PATH
        found = shutil.which(self.executable)
        checks.append(CheckResult(
            name="executable",
            passed=found is not None,
            message=f"{self.executable} -> {found}" if found else f"{self.executable} not found on PATH",
            severity="info" if found else "critical",
        ))

        critical_fail = any(c.severity == "critical" and not c.passed for c in checks)
        warning_fail = any(c.severity == "warning" and not c.passed for c in checks)

        if critical_fail:
            status = "blocked"
        elif warning_fail:
            status = "degraded"
        else:
            status = "ready"

        for c in checks:
            if not c.passed:
                logger.warning("Preflight %s: %s", c.name, c.message)
        return PreflightReport(status=status, checks=checks)

    @staticmethod
    def _file_check(name: str, path: Path) -> CheckResult:
        exists = path.is_file()
        return CheckResult(
            name=name,
            passed=exists,
            message=f"{path}" if exists else f"Missing {name}: {path}",
            severity="info" if exists else "critical",
        )
