"""Unit tests for hostenv.config."""

from pathlib import Path

import pytest

from hostenv.config import load_config
from hostenv.models import DEFAULT_CONNECT_TIMEOUT, DEFAULT_STORAGE_DIR


class TestLoadConfig:
    def test_defaults(self):
        config = load_config({})
        assert config.storage_path == DEFAULT_STORAGE_DIR
        assert config.connect_timeout == DEFAULT_CONNECT_TIMEOUT
        assert config.machine_dir == DEFAULT_STORAGE_DIR / "machines"

    def test_storage_override(self, tmp_path):
        config = load_config({"HOSTENV_STORAGE_PATH": str(tmp_path)})
        assert config.machine_dir == Path(tmp_path) / "machines"

    def test_timeout_override(self):
        assert load_config({"HOSTENV_CONNECT_TIMEOUT": "0.5"}).connect_timeout == 0.5

    @pytest.mark.parametrize("value", ["soon", "-1", "0"])
    def test_invalid_timeout(self, value):
        with pytest.raises(ValueError, match="HOSTENV_CONNECT_TIMEOUT"):
            load_config({"HOSTENV_CONNECT_TIMEOUT": value})
