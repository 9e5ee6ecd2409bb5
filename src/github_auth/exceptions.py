"""Exception types for the github_auth client library."""

from .types import ErrorKind


class GitHubAuthError(Exception):
    """Base exception for all github_auth errors."""
    kind: ErrorKind


class UsernameRequiredError(GitHubAuthError):
    """KeysClient was constructed without a usable username."""
    kind = ErrorKind.USERNAME_REQUIRED


class GitHubUserDoesNotExistError(GitHubAuthError):
    """GitHub has no user by that name."""
    kind = ErrorKind.USER_NOT_FOUND


class GitHubUnavailableError(GitHubAuthError):
    """GitHub could not be reached."""
    kind = ErrorKind.UNAVAILABLE


class GitHubUnexpectedResponseError(GitHubAuthError):
    """GitHub answered with a status or body the client does not understand."""
    kind = ErrorKind.UNEXPECTED_RESPONSE

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(GitHubAuthError):
    """Network communication error."""
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
