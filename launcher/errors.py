"""Base exception for launcher failures."""


class LauncherError(Exception):
    """Raised when a launch step fails.

    ``returncode`` is the process status the launcher should exit with.
    """

    def __init__(self, message: str, returncode: int = 1) -> None:
        super().__init__(message)
        self.returncode = returncode
