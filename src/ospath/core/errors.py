"""Error definitions for ospath."""


class OSPathError(Exception):
    """Base class for ospath errors."""


class UserNotFoundError(OSPathError, LookupError):
    """Raised when a home directory cannot be resolved for ~ or ~user."""

    def __init__(self, username: str = ""):
        self.username = username
        if username:
            message = f"Cannot resolve home directory for user '{username}'"
        else:
            message = "Cannot resolve home directory for the current user"
        super().__init__(message)
