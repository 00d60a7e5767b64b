import os
import stat
from unittest.mock import patch

from ospath.core.models import Config, FileStatus


class TestConfig:
    def test_default_config(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config()
        assert config.home_env_var == "HOME"
        assert config.strict_user_lookup is True
        assert config.log_level == "WARNING"
        assert config.theme == "manhattan"

    def test_custom_config(self):
        config = Config(strict_user_lookup=False, theme="sunset")
        assert config.strict_user_lookup is False
        assert config.theme == "sunset"

    def test_environment_overrides(self):
        env = {
            "OSPATH_STRICT_USER_LOOKUP": "no",
            "OSPATH_LOG_LEVEL": "DEBUG",
            "OSPATH_THEME": "matrix",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config()
        assert config.strict_user_lookup is False
        assert config.log_level == "DEBUG"
        assert config.theme == "matrix"

    def test_strict_flag_truthy_values(self):
        with patch.dict(os.environ, {"OSPATH_STRICT_USER_LOOKUP": "1"}, clear=True):
            assert Config().strict_user_lookup is True


class TestFileStatus:
    def test_from_regular_file(self):
        result = os.stat_result((stat.S_IFREG | 0o644, 42, 7, 1, 0, 0, 10, 0, 0, 0))
        status = FileStatus.from_stat(result)
        assert status.exists is True
        assert status.is_file is True
        assert status.is_dir is False
        assert status.is_link is False
        assert status.device == 7
        assert status.inode == 42

    def test_from_symlink(self):
        result = os.stat_result((stat.S_IFLNK | 0o777, 1, 1, 1, 0, 0, 0, 0, 0, 0))
        status = FileStatus.from_stat(result)
        assert status.is_link is True
        assert status.is_file is False

    def test_missing(self):
        status = FileStatus.missing()
        assert status.exists is False
        assert not (status.is_file or status.is_dir or status.is_link)

    def test_same_file(self):
        a = FileStatus(exists=True, is_dir=True, device=1, inode=2)
        b = FileStatus(exists=True, is_dir=True, device=1, inode=2)
        c = FileStatus(exists=True, is_dir=True, device=2, inode=2)
        assert a.same_file(b) is True
        assert a.same_file(c) is False
        assert FileStatus.missing().same_file(FileStatus.missing()) is False
