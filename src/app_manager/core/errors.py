"""Exception hierarchy for app manager operations."""

from typing import Optional


class AppManagerError(Exception):
    """Base class for every error the CLI knows how to report."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class InvalidArgument(AppManagerError):
    """A required name is missing or an option value is malformed."""


class RemoteFailure(AppManagerError):
    """A call to the remote API failed."""

    def __init__(
        self, message: str, status: Optional[int] = None, hint: Optional[str] = None
    ):
        super().__init__(message, hint=hint)
        self.status = status


class RemoteUnauthorized(RemoteFailure):
    """Credentials are missing, invalid or lack access."""


class RemoteNotFound(RemoteFailure):
    """The requested app (or sub-resource) does not exist."""


class RemoteValidationFailed(RemoteFailure):
    """The remote API rejected the request parameters."""


class RemoteUnavailable(RemoteFailure):
    """The remote API could not be reached."""


class TimeoutExceeded(AppManagerError):
    """A polling wait ran past its deadline."""

    def __init__(self, message: str, timeout: float):
        super().__init__(message)
        self.timeout = timeout


class ConfirmationDeclined(AppManagerError):
    """The user did not confirm a destructive action. Not a failure."""


class VcsFailure(AppManagerError):
    """A git command could not be run or exited with an error."""


class ConfigError(AppManagerError):
    """Configuration could not be loaded, saved or validated."""
