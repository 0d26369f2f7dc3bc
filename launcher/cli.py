"""Process entry point.

The launcher takes no options of its own: every argument belongs to
ansible-playbook.  Settings come from ``.env`` and ``LAUNCHER_*``
environment variables instead.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from launcher.config import EXIT_INTERRUPTED
from launcher.deployment.launcher import Launcher
from launcher.deployment.paths import resolve_script_dir
from launcher.errors import LauncherError
from launcher.settings import SettingsManager

logger = logging.getLogger(__name__)


def _level(name: str | None) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _configure_logging() -> None:
    """Set up stderr logging before settings load.

    Only the environment is known at this point; the level is adjusted
    once ``.env`` has been read.
    """
    level = _level(os.environ.get("LAUNCHER_LOG_LEVEL"))
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(message)s",
    )
    logging.getLogger().setLevel(level)


def main(
    argv: Sequence[str] | None = None,
    script_path: str | Path | None = None,
) -> int:
    """Run the deployment and return the process exit status.

    Parameters
    ----------
    argv:
        Arguments forwarded to the tool.  Defaults to ``sys.argv[1:]``.
    script_path:
        Launcher location.  Defaults to ``sys.argv[0]``.
    """
    if argv is None:
        argv = sys.argv[1:]
    if script_path is None:
        script_path = sys.argv[0]

    try:
        script_dir = resolve_script_dir(script_path)
    except OSError as exc:
        print(f"cannot resolve launcher directory: {exc}", file=sys.stderr)
        return 1

    _configure_logging()
    settings = SettingsManager().load(script_dir)
    logging.getLogger().setLevel(_level(settings.log_level))

    try:
        return Launcher(script_dir / Path(script_path).name, settings=settings).launch(list(argv))
    except LauncherError as exc:
        logger.error("%s", exc)
        return exc.returncode or 1
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
