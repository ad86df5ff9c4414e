class GitLaunchError(Exception):
    """Base class for failures reported back to the workflow."""


class InputError(GitLaunchError):
    """Raised when a required action input is not supplied."""


class ConfigurationError(GitLaunchError):
    """Raised when inputs are missing or invalid for the selected action."""


class RemoteRejection(GitLaunchError):
    """Raised when GitLaunch answers with a non-success status code."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code
