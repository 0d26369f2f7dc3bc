"""Deployment — path resolution, command assembly, preflight and execution."""

from launcher.deployment.command import DeployCommand, build_command
from launcher.deployment.launcher import Launcher
from launcher.deployment.paths import DeployPaths, build_paths, resolve_script_dir
from launcher.deployment.preflight import CheckResult, PreflightChecker, PreflightReport
from launcher.deployment.runner import ToolNotFoundError, run_command

__all__ = [
    "CheckResult",
    "DeployCommand",
    "DeployPaths",
    "Launcher",
    "PreflightChecker",
    "PreflightReport",
    "ToolNotFoundError",
    "build_command",
    "build_paths",
    "resolve_script_dir",
    "run_command",
]
