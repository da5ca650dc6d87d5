from typing import Optional


class ActivityError(Exception):
    """Base class for every failure while fetching user activity."""


class UsageError(ActivityError):
    """The command line did not name a GitHub user."""


class TransportError(ActivityError):
    """The GitHub API could not be reached."""

    def __init__(self, cause: BaseException):
        """Init the TransportError."""
        super().__init__(f"request to GitHub failed: {cause}")
        self.cause = cause


class RemoteError(ActivityError):
    """GitHub answered with a non-OK status and a structured error body."""

    def __init__(self, message: str, status_code: int, api_error=None):
        """Init the RemoteError."""
        super().__init__(message)
        self.status_code = status_code
        self.api_error = api_error


class DecodeError(ActivityError):
    """The response body did not match the expected JSON shape."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        """Init the DecodeError."""
        super().__init__(message)
        self.cause = cause


class ConfigError(ActivityError):
    """An environment setting has a value that can't be used."""
