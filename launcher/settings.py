"""SettingsManager — layered runtime settings and the .env template."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from launcher.config import ANSIBLE_PLAYBOOK

logger = logging.getLogger(__name__)

# All known settings keys with defaults
_SETTINGS_KEYS: dict[str, dict[str, Any]] = {
    "LAUNCHER_ANSIBLE_PLAYBOOK": {
        "default": ANSIBLE_PLAYBOOK,
        "description": "Deployment tool executable",
    },
    "LAUNCHER_ASK_BECOME_PASS": {
        "default": "false",
        "description": "Prompt for the become password (enable when setting up a new machine)",
    },
    "LAUNCHER_GIT": {"default": "git", "description": "git executable"},
    "LAUNCHER_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
}

_TRUE_VALUES = ("true", "1", "yes", "on")


class LauncherSettings(BaseModel):
    """Typed view of the merged settings."""

    ansible_playbook: str = ANSIBLE_PLAYBOOK
    ask_become_pass: bool = False
    git: str = "git"
    log_level: str = "INFO"


class SettingsManager:
    """Load launcher settings for a launcher directory."""

    def generate_env_template(self, script_dir: str | Path) -> Path:
        """Create .env.example with all settings keys.

        Returns the path to the generated file.
        """
        env_path = Path(script_dir) / ".env.example"

        lines = ["# Playbook Launcher settings", "# Copy to .env and adjust", ""]
        for key, info in _SETTINGS_KEYS.items():
            lines.append(f"# {info['description']}")
            lines.append(f"{key}={info['default']}")
            lines.append("")

        env_path.write_text("\n".join(lines), encoding="utf-8")
        return env_path

    def load_raw(self, script_dir: str | Path) -> dict[str, str]:
        """Load merged settings: defaults -> .env -> env vars.

        Returns a flat dict of string values.
        """
        values: dict[str, str] = {key: str(info["default"]) for key, info in _SETTINGS_KEYS.items()}

        env_file = Path(script_dir) / ".env"
        if env_file.is_file():
            try:
                for line in env_file.read_text(encoding="utf-8").splitlines():
                    line = line.strip()
                    if not line or line.startswith("#"):
                        continue
                    if "=" in line:
                        k, v = line.split("=", 1)
                        values[k.strip()] = v.strip().strip('"').strip("'")
            except OSError:
                logger.debug("Could not read %s", env_file, exc_info=True)

        # Environment variables override all
        for key in _SETTINGS_KEYS:
            env_val = os.environ.get(key)
            if env_val is not None:
                values[key] = env_val

        return values

    def load(self, script_dir: str | Path) -> LauncherSettings:
        """Return typed settings for *script_dir*."""
        raw = self.load_raw(script_dir)
        return LauncherSettings(
            ansible_playbook=raw["LAUNCHER_ANSIBLE_PLAYBOOK"] or ANSIBLE_PLAYBOOK,
            ask_become_pass=raw["LAUNCHER_ASK_BECOME_PASS"].strip().lower() in _TRUE_VALUES,
            git=raw["LAUNCHER_GIT"] or "git",
            log_level=raw["LAUNCHER_LOG_LEVEL"].upper() or "INFO",
        )
