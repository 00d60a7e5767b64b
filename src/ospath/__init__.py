"""
POSIX path manipulation and filesystem queries.

The string functions (normalize, split, join, ...) never touch the
filesystem. The query functions run against the local system through a
shared FilesystemQuery; build your own FilesystemQuery to inject a
different adapter or configuration.
"""

from .core import (
    CURDIR,
    PARDIR,
    SEP,
    Config,
    FileStatus,
    FilesystemQuery,
    OSPathError,
    PathSyntax,
    UserNotFoundError,
)

__version__ = "0.1.0"

normalize = PathSyntax.normalize
split = PathSyntax.split
base_name = PathSyntax.base_name
dir_name = PathSyntax.dir_name
is_absolute = PathSyntax.is_absolute
join = PathSyntax.join
common_prefix = PathSyntax.common_prefix
common_path = PathSyntax.common_path

_default_query = None


def _query() -> FilesystemQuery:
    global _default_query
    if _default_query is None:
        _default_query = FilesystemQuery()
    return _default_query


def exists(path: str) -> bool:
    """Test whether a path exists. False for broken symbolic links."""
    return _query().exists(path)


def lexists(path: str) -> bool:
    """Test whether a path exists. True for broken symbolic links."""
    return _query().lexists(path)


def is_file(path: str) -> bool:
    """Test whether a path is a regular file, following symlinks."""
    return _query().is_file(path)


def is_dir(path: str) -> bool:
    """Test whether a path is a directory, following symlinks."""
    return _query().is_dir(path)


def is_link(path: str) -> bool:
    """Test whether a path is a symbolic link."""
    return _query().is_link(path)


def is_mount(path: str) -> bool:
    """Test whether a path is a mount point."""
    return _query().is_mount(path)


def real_path(path: str) -> str:
    """Return the canonical path, or an empty string on failure."""
    return _query().real_path(path)


def abs_path(path: str) -> str:
    """Return a normalized absolute version of a path."""
    return _query().abs_path(path)


def expand_user(path: str, strict=None) -> str:
    """Replace an initial ~ or ~user with that user's home directory."""
    return _query().expand_user(path, strict=strict)


__all__ = [
    "normalize", "split", "base_name", "dir_name", "is_absolute", "join",
    "common_prefix", "common_path",
    "exists", "lexists", "is_file", "is_dir", "is_link", "is_mount",
    "real_path", "abs_path", "expand_user",
    "Config", "FileStatus", "FilesystemQuery", "PathSyntax",
    "OSPathError", "UserNotFoundError", "SEP", "CURDIR", "PARDIR",
]
