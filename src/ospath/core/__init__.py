"""Core components for ospath."""

from .errors import OSPathError, UserNotFoundError
from .models import Config, FileStatus
from .query import FilesystemQuery
from .syntax import CURDIR, PARDIR, SEP, PathSyntax

__all__ = [
    "Config",
    "FileStatus",
    "FilesystemQuery",
    "PathSyntax",
    "OSPathError",
    "UserNotFoundError",
    "SEP",
    "CURDIR",
    "PARDIR",
]
