"""
Base system adapter interface.

This module defines the abstract interface to the operating system that the
filesystem queries are built on, so the queries can run against the real
system or an in-memory fake.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

from ..core.models import Config, FileStatus

logger = logging.getLogger(__name__)


class SystemAdapter(ABC):
    """
    Abstract base class for system adapters.

    Implementations provide the working directory, home directory lookup,
    raw metadata and canonicalization. The raw calls raise OSError with the
    original errno; file_status() turns failures into a missing status.
    """

    def __init__(self, config: Optional[Config] = None):
        """Initialize adapter with configuration."""
        self.config = config or Config()

    @abstractmethod
    def current_working_directory(self) -> str:
        """Get the current working directory."""
        pass

    @abstractmethod
    def home_directory(self, username: Optional[str] = None) -> str:
        """
        Get a home directory.

        Args:
            username: User to look up. None or "" means the current user.

        Returns:
            The home directory, or an empty string if it can't be resolved.
        """
        pass

    @abstractmethod
    def stat(self, path: str, follow_symlinks: bool = True) -> os.stat_result:
        """
        Get raw metadata for a path.

        Args:
            path: Path to inspect.
            follow_symlinks: Whether a terminal symlink is followed.

        Raises:
            OSError: If the metadata call fails.
            ValueError: If the path contains a NUL byte.
        """
        pass

    @abstractmethod
    def real_path(self, path: str) -> str:
        """
        Get the canonical path with every symlink resolved.

        Raises:
            OSError: If the path doesn't exist, can't be accessed or loops.
            ValueError: If the path contains a NUL byte.
        """
        pass

    def file_status(self, path: str, follow_symlinks: bool = True) -> FileStatus:
        """Get metadata for a path, reporting a missing status on failure."""
        try:
            result = self.stat(path, follow_symlinks=follow_symlinks)
        except (OSError, ValueError) as e:
            logger.debug(f"stat failed for {path!r}: {e}")
            return FileStatus.missing()
        return FileStatus.from_stat(result)
