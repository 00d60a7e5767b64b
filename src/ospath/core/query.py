"""
Filesystem queries.

This module answers questions about paths on a real (or faked) filesystem:
existence, file type, mount points, canonical and absolute forms, and home
directory expansion. Failures are reported as False or an empty string;
the underlying cause is logged at debug level.
"""

import logging
from typing import TYPE_CHECKING, Optional

from ..utils.string_ops import StringOps
from .errors import UserNotFoundError
from .models import Config
from .syntax import PARDIR, SEP, PathSyntax

if TYPE_CHECKING:
    from ..adapters.base import SystemAdapter

logger = logging.getLogger(__name__)

TILDE = '~'


class FilesystemQuery:
    """Filesystem predicates and path resolution over a system adapter."""

    def __init__(self, config: Optional[Config] = None,
                 adapter: Optional['SystemAdapter'] = None):
        """
        Initialize the query layer.

        Args:
            config: Configuration, loaded from the environment if None.
            adapter: SystemAdapter to query. Defaults to the local system.
        """
        self.config = config or Config()
        if adapter is None:
            from ..adapters import create_adapter
            adapter = create_adapter(self.config)
        self.adapter = adapter

    def is_absolute(self, path: str) -> bool:
        """Return whether a path is absolute."""
        return PathSyntax.is_absolute(path)

    def exists(self, path: str) -> bool:
        """Test whether a path exists. False for broken symbolic links."""
        return self.adapter.file_status(path).exists

    def lexists(self, path: str) -> bool:
        """Test whether a path exists. True for broken symbolic links."""
        return self.adapter.file_status(path, follow_symlinks=False).exists

    def is_file(self, path: str) -> bool:
        """Test whether a path is a regular file, following symlinks."""
        return self.adapter.file_status(path).is_file

    def is_dir(self, path: str) -> bool:
        """Test whether a path is a directory, following symlinks."""
        return self.adapter.file_status(path).is_dir

    def is_link(self, path: str) -> bool:
        """Test whether a path is a symbolic link."""
        return self.adapter.file_status(path, follow_symlinks=False).is_link

    def is_mount(self, path: str) -> bool:
        """
        Test whether a path is a mount point.

        The path is compared with its canonical parent: a different device
        means something is mounted here, and the same inode on the same
        device means the path is the root. Bind mounts on the same
        filesystem are not detected.
        """
        status = self.adapter.file_status(path, follow_symlinks=False)
        if not status.exists or status.is_link:
            return False

        parent = self.real_path(PathSyntax.join(path, PARDIR))
        if not parent:
            return False
        parent_status = self.adapter.file_status(parent, follow_symlinks=False)
        if not parent_status.exists:
            return False

        if status.device != parent_status.device:
            return True
        return status.same_file(parent_status)

    def real_path(self, path: str) -> str:
        """
        Return the canonical path, eliminating any symbolic links.

        Returns an empty string if the path can't be resolved. Use
        adapter.real_path() directly to get the OSError instead.
        """
        try:
            return self.adapter.real_path(path)
        except (OSError, ValueError) as e:
            logger.debug(f"realpath failed for {path!r}: {e}")
            return ''

    def abs_path(self, path: str) -> str:
        """Return a normalized absolute version of a path."""
        if not PathSyntax.is_absolute(path):
            path = PathSyntax.join(self.adapter.current_working_directory(), path)
        return PathSyntax.normalize(path)

    def expand_user(self, path: str, strict: Optional[bool] = None) -> str:
        """
        Replace an initial ~ or ~user with that user's home directory.

        A bare ~ uses the configured environment variable (HOME) and falls
        back to the password database; ~user is looked up in the password
        database.

        Args:
            path: Path to expand.
            strict: Raise when the home can't be resolved. Defaults to
                config.strict_user_lookup. When False an unresolved home
                expands to an empty string.

        Returns:
            The expanded path, or path itself if it doesn't start with ~.

        Raises:
            UserNotFoundError: If strict and no home directory was found.
        """
        if not StringOps.starts_with(path, TILDE):
            return path

        index = path.find(SEP, 1)
        if index < 0:
            index = len(path)
        username = path[1:index]

        home = self.adapter.home_directory(username or None)
        if not home:
            if strict is None:
                strict = self.config.strict_user_lookup
            if strict:
                raise UserNotFoundError(username)
            logger.warning(f"Unresolved home directory while expanding {path!r}")
            return path[index:]

        stripped = home.rstrip(SEP)
        return (stripped + path[index:]) or SEP
