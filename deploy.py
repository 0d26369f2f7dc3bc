#!/usr/bin/env python3
"""Run the deployment playbook for the checked-out revision.

Every argument is passed through to ansible-playbook, e.g.::

    ./deploy.py --limit staging
"""

from launcher.cli import main

if __name__ == "__main__":
    raise SystemExit(main(script_path=__file__))
