"""Global configuration: fixed paths and names."""

# Subdirectory, beside the launcher script, holding the playbook and inventory
DEPLOY_DIR = "deploy"

PLAYBOOK_NAME = "site.yml"
INVENTORY_NAME = "hosts"

# External deployment tool
ANSIBLE_PLAYBOOK = "ansible-playbook"

# Extra variable carrying the revision identifier into the playbook
GITSHA_VAR = "gitsha"

# Conventional shell status for "command not found"
EXIT_NOT_FOUND = 127
EXIT_INTERRUPTED = 130

# Status for a child killed by signal N is EXIT_SIGNAL_BASE + N
EXIT_SIGNAL_BASE = 128
