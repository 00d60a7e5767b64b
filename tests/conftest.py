import errno
import os
import shutil
import stat
import tempfile
from pathlib import Path

import pytest

from ospath.adapters.base import SystemAdapter
from ospath.core.models import Config
from ospath.core.syntax import PathSyntax


def make_stat(mode: int, inode: int, device: int = 1) -> os.stat_result:
    """Build a stat result with just the fields the queries read."""
    return os.stat_result((mode, inode, device, 1, 0, 0, 0, 0, 0, 0))


DIR = stat.S_IFDIR | 0o755
FILE = stat.S_IFREG | 0o644
LINK = stat.S_IFLNK | 0o777


class FakeSystemAdapter(SystemAdapter):
    """In-memory system: a small tree with one mounted device under /mnt/usb."""

    def __init__(self, config=None, cwd="/home/alice/work", env_home="/home/alice"):
        super().__init__(config or Config(strict_user_lookup=True))
        self.cwd = cwd
        self.env_home = env_home
        self.homes = {"alice": "/home/alice", "root": "/root/"}
        self.entries = {
            "/": make_stat(DIR, 2),
            "/home": make_stat(DIR, 10),
            "/home/alice": make_stat(DIR, 11),
            "/home/alice/notes.txt": make_stat(FILE, 12),
            "/home/alice/link": make_stat(LINK, 13),
            "/home/alice/dangling": make_stat(LINK, 14),
            "/mnt": make_stat(DIR, 20),
            "/mnt/usb": make_stat(DIR, 2, device=2),
        }
        self.links = {
            "/home/alice/link": "/home/alice/notes.txt",
            "/home/alice/dangling": "/nowhere",
        }

    def current_working_directory(self):
        return self.cwd

    def home_directory(self, username=None):
        if not username:
            return self.env_home or ""
        return self.homes.get(username, "")

    def stat(self, path, follow_symlinks=True):
        if follow_symlinks:
            while path in self.links:
                path = self.links[path]
        if path not in self.entries:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return self.entries[path]

    def real_path(self, path):
        resolved = PathSyntax.normalize(path)
        while resolved in self.links:
            resolved = self.links[resolved]
        if resolved not in self.entries:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return resolved


@pytest.fixture
def fake_adapter():
    """In-memory system adapter."""
    return FakeSystemAdapter()


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def sample_tree(temp_workspace):
    """Create a directory tree with files, directories and symlinks."""
    root = temp_workspace / "tree"
    root.mkdir()

    (root / "docs").mkdir()
    (root / "docs" / "guide.txt").write_text("guide")
    (root / "file.txt").write_text("content")

    os.symlink(root / "file.txt", root / "file_link")
    os.symlink(root / "docs", root / "docs_link")
    os.symlink(root / "missing", root / "broken_link")

    # Two links pointing at each other
    os.symlink(root / "loop_b", root / "loop_a")
    os.symlink(root / "loop_a", root / "loop_b")

    return root
