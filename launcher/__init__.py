"""Playbook Launcher — run the deployment playbook pinned to the checked-out git revision."""

__version__ = "1.0.0"

from launcher.deployment.command import DeployCommand, build_command
from launcher.deployment.launcher import Launcher
from launcher.deployment.paths import DeployPaths, build_paths, resolve_script_dir
from launcher.deployment.preflight import CheckResult, PreflightChecker, PreflightReport
from launcher.deployment.runner import ToolNotFoundError, run_command
from launcher.errors import LauncherError
from launcher.settings import LauncherSettings, SettingsManager
from launcher.vcs.repo import GitError, RepoManager

__all__ = [
    "__version__",
    # Entry point
    "Launcher",
    # Deployment
    "CheckResult",
    "DeployCommand",
    "DeployPaths",
    "PreflightChecker",
    "PreflightReport",
    "ToolNotFoundError",
    "build_command",
    "build_paths",
    "resolve_script_dir",
    "run_command",
    # Configuration
    "LauncherSettings",
    "SettingsManager",
    # Version control
    "GitError",
    "RepoManager",
    # Errors
    "LauncherError",
]
