"""Launcher-relative playbook and inventory locations."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from launcher.config import DEPLOY_DIR, INVENTORY_NAME, PLAYBOOK_NAME


class DeployPaths(BaseModel):
    """Absolute locations derived from the launcher directory."""

    script_dir: Path
    playbook: Path
    inventory: Path


def resolve_script_dir(script_path: str | Path) -> Path:
    """Return the physical, absolute directory containing *script_path*.

    Symlinks in the directory chain are resolved; a symlinked script
    itself is not followed, so the directory is the one the script was
    invoked from.
    """
    return Path(script_path).absolute().parent.resolve(strict=True)


def build_paths(script_dir: str | Path) -> DeployPaths:
    """Compose the playbook and inventory paths under *script_dir*.

    Existence is not checked here; see :class:`PreflightChecker`.
    """
    base = Path(script_dir)
    if not base.is_absolute():
        raise ValueError(f"script_dir must be absolute: {base}")
    deploy = base / DEPLOY_DIR
    return DeployPaths(
        script_dir=base,
        playbook=deploy / PLAYBOOK_NAME,
        inventory=deploy / INVENTORY_NAME,
    )
