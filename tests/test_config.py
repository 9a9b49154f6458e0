"""Tests for configuration loading."""

import os

import pytest
from emome_sms.config import DEFAULT_HOST, load_config


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate os.environ from the real environment."""
    env = {key: value for key, value in os.environ.items() if not key.startswith("EMOME_")}
    monkeypatch.setattr(os, "environ", env)
    return env


class TestLoadConfig:
    """Test cases for .env configuration."""
    
    def test_defaults(self, clean_env, tmp_path):
        """Test defaults when nothing is configured."""
        config = load_config(tmp_path / "missing.env")
        assert config.account == ""
        assert config.password == ""
        assert config.host == DEFAULT_HOST
        assert config.timeout == 30.0
        assert config.connect_timeout == 30.0
        assert config.legacy_encoding is False
    
    def test_env_file(self, clean_env, tmp_path):
        """Test values read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "EMOME_ACCOUNT=acc\n"
            "EMOME_PASSWORD=secret\n"
            "EMOME_FROM_ADDR=0900000000\n"
            "EMOME_TIMEOUT=15\n"
            "EMOME_LEGACY_ENCODING=yes\n",
            encoding="utf-8",
        )
        config = load_config(env_file)
        assert config.account == "acc"
        assert config.password == "secret"
        assert config.from_addr == "0900000000"
        assert config.timeout == 15.0
        assert config.legacy_encoding is True
    
    def test_environment_wins(self, clean_env, tmp_path):
        """Test process environment is not overridden by the file."""
        clean_env["EMOME_ACCOUNT"] = "from-env"
        env_file = tmp_path / ".env"
        env_file.write_text("EMOME_ACCOUNT=from-file\n", encoding="utf-8")
        assert load_config(env_file).account == "from-env"
