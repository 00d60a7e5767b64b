"""Local operating system adapter implementation."""
import logging
import os
import pwd
from typing import Optional

from .base import SystemAdapter

logger = logging.getLogger(__name__)


class LocalSystemAdapter(SystemAdapter):
    """Adapter backed by the running process and the local filesystem."""

    def current_working_directory(self) -> str:
        """Get the current working directory of the process."""
        return os.getcwd()

    def home_directory(self, username: Optional[str] = None) -> str:
        """
        Get a home directory.

        For the current user the configured environment variable wins when
        it is set, even if empty; otherwise the password database entry
        for the real uid is used. Other users come from the password
        database only.
        """
        if not username:
            env_var = self.config.home_env_var
            if env_var in os.environ:
                return os.environ[env_var]
            try:
                return pwd.getpwuid(os.getuid()).pw_dir
            except KeyError:
                logger.debug(f"No password entry for uid {os.getuid()}")
                return ""

        try:
            return pwd.getpwnam(username).pw_dir
        except KeyError:
            logger.debug(f"No password entry for user {username!r}")
            return ""

    def stat(self, path: str, follow_symlinks: bool = True) -> os.stat_result:
        """Get raw metadata via stat(2) or lstat(2)."""
        if follow_symlinks:
            return os.stat(path)
        return os.lstat(path)

    def real_path(self, path: str) -> str:
        """Resolve the path with realpath(3) semantics."""
        # realpath() folds '..' lexically and reads '' as the cwd, so let
        # stat(2) report ENOENT/ENOTDIR first
        os.stat(path)
        return os.path.realpath(path, strict=True)
