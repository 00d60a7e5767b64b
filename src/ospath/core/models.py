"""
Core data models for ospath.

This module contains the configuration settings and the file metadata
snapshot passed between the system adapters and the filesystem queries.
"""

import os
import stat
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in {'0', 'false', 'no', 'off', ''}


@dataclass
class Config:
    """Configuration settings for ospath."""

    # Environment variable consulted before the password database for ~
    home_env_var: str = 'HOME'

    # Raise instead of returning a truncated path when ~user is unknown
    strict_user_lookup: bool = field(
        default_factory=lambda: _env_flag('OSPATH_STRICT_USER_LOOKUP', True)
    )

    log_level: str = field(default_factory=lambda: os.getenv('OSPATH_LOG_LEVEL', 'WARNING'))
    theme: str = field(default_factory=lambda: os.getenv('OSPATH_THEME', 'manhattan'))


@dataclass(frozen=True)
class FileStatus:
    """Snapshot of the metadata the filesystem queries care about."""

    exists: bool
    is_file: bool = False
    is_dir: bool = False
    is_link: bool = False
    device: int = 0
    inode: int = 0

    @classmethod
    def from_stat(cls, result: os.stat_result) -> 'FileStatus':
        """Build a status from an ``os.stat`` / ``os.lstat`` result."""
        mode = result.st_mode
        return cls(
            exists=True,
            is_file=stat.S_ISREG(mode),
            is_dir=stat.S_ISDIR(mode),
            is_link=stat.S_ISLNK(mode),
            device=result.st_dev,
            inode=result.st_ino,
        )

    @classmethod
    def missing(cls) -> 'FileStatus':
        """Status reported when the metadata call fails."""
        return cls(exists=False)

    def same_file(self, other: 'FileStatus') -> bool:
        """Check if both statuses identify the same device and inode."""
        return (self.exists and other.exists and
                self.device == other.device and self.inode == other.inode)
