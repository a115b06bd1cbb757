"""Tests for SwitchSettings loading."""

from __future__ import annotations

import pytest

from superstackctl.config import SwitchSettings
from superstackctl.exceptions import ConfigurationError
from superstackctl.telnet import PROMPT


class TestSwitchSettings:
    """Test SwitchSettings defaults and validation."""

    def test_defaults(self):
        settings = SwitchSettings(address="10.0.0.2", username="admin", password="pw")
        assert settings.port == 23
        assert settings.connect_timeout == 5.0
        assert settings.read_timeout == 2.0
        assert settings.prompt == PROMPT
        assert settings.login_prompt == "Login: "
        assert settings.password_prompt == "Password: "

    def test_password_hidden_in_repr(self):
        settings = SwitchSettings(address="10.0.0.2", username="admin", password="pw")
        assert "pw" not in repr(settings)
        assert settings.password.get_secret_value() == "pw"


class TestFromEnv:
    """Test SwitchSettings.from_env."""

    def test_reads_environment(self):
        env = {
            "ADDRESS": "10.0.0.2",
            "USERNAME": "admin",
            "PASSWORD": "pw",
            "SUPERSTACK_PORT": "2323",
            "SUPERSTACK_READ_TIMEOUT": "4.5",
        }
        settings = SwitchSettings.from_env(environ=env)

        assert settings.address == "10.0.0.2"
        assert settings.username == "admin"
        assert settings.password.get_secret_value() == "pw"
        assert settings.port == 2323
        assert settings.read_timeout == 4.5

    def test_overrides_win(self):
        env = {"ADDRESS": "10.0.0.2", "USERNAME": "admin", "PASSWORD": "pw"}
        settings = SwitchSettings.from_env(environ=env, address="10.0.0.3", port=None)

        assert settings.address == "10.0.0.3"
        assert settings.port == 23

    def test_missing_values(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SwitchSettings.from_env(environ={"ADDRESS": "10.0.0.2"})
        assert "username" in str(exc_info.value)
        assert "password" in str(exc_info.value)

    def test_invalid_value(self):
        env = {"ADDRESS": "10.0.0.2", "USERNAME": "admin", "PASSWORD": "pw", "SUPERSTACK_PORT": "telnet"}
        with pytest.raises(ConfigurationError) as exc_info:
            SwitchSettings.from_env(environ=env)
        assert "Invalid" in str(exc_info.value)

    def test_invalid_prompt_pattern(self):
        env = {"ADDRESS": "10.0.0.2", "USERNAME": "admin", "PASSWORD": "pw", "SUPERSTACK_PROMPT": "menu ("}
        with pytest.raises(ConfigurationError) as exc_info:
            SwitchSettings.from_env(environ=env)
        assert "regular expression" in str(exc_info.value)

    def test_loads_dotenv_file(self, tmp_path, monkeypatch):
        for var in ("ADDRESS", "USERNAME", "PASSWORD"):
            monkeypatch.setenv(var, "")
            monkeypatch.delenv(var)
        (tmp_path / ".env").write_text("ADDRESS=10.0.0.9\nUSERNAME=ops\nPASSWORD=pw\n")
        monkeypatch.chdir(tmp_path)

        settings = SwitchSettings.from_env()

        assert settings.address == "10.0.0.9"
        assert settings.username == "ops"
