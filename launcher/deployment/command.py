"""DeployCommand — the ansible-playbook invocation."""

from __future__ import annotations

import shlex
from collections.abc import Sequence

from pydantic import BaseModel, Field

from launcher.config import ANSIBLE_PLAYBOOK, GITSHA_VAR
from launcher.deployment.paths import DeployPaths


class DeployCommand(BaseModel):
    """A fully assembled tool command line."""

    argv: list[str] = Field(default_factory=list)

    @property
    def executable(self) -> str:
        return self.argv[0] if self.argv else ""

    def trace(self) -> str:
        """Render the command the way ``set -x`` prints it."""
        return "+ " + shlex.join(self.argv)


def build_command(
    commit: str,
    paths: DeployPaths,
    extra_args: Sequence[str] = (),
    *,
    executable: str = ANSIBLE_PLAYBOOK,
    ask_become_pass: bool = False,
) -> DeployCommand:
    """Assemble the deployment command.

    Parameters
    ----------
    commit:
        Revision identifier bound to the ``gitsha`` extra variable.
    paths:
        Playbook and inventory locations.
    extra_args:
        Caller arguments, appended verbatim and in order.
    executable:
        Tool to run.
    ask_become_pass:
        Insert ``--ask-become-pass`` ahead of the caller arguments.
    """
    argv = [
        executable,
        "--extra-vars", f"{GITSHA_VAR}={commit}",
        "--inventory", str(paths.inventory),
        str(paths.playbook),
    ]
    if ask_become_pass:
        argv.append("--ask-become-pass")
    argv.extend(extra_args)
    return DeployCommand(argv=argv)
