"""Connection settings for a SuperStack switch."""

from __future__ import annotations

import os
import re
from typing import Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from superstackctl.exceptions import ConfigurationError
from superstackctl.telnet import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PORT,
    DEFAULT_READ_TIMEOUT,
    LOGIN_PROMPT,
    PASSWORD_PROMPT,
    PROMPT,
)

# Environment variable -> settings field
ENV_VARS = {
    "ADDRESS": "address",
    "USERNAME": "username",
    "PASSWORD": "password",
    "SUPERSTACK_PORT": "port",
    "SUPERSTACK_CONNECT_TIMEOUT": "connect_timeout",
    "SUPERSTACK_READ_TIMEOUT": "read_timeout",
    "SUPERSTACK_PROMPT": "prompt",
}


class SwitchSettings(BaseModel):
    """Address, credentials and console dialect of one switch."""

    address: str = Field(min_length=1)
    username: str
    password: SecretStr
    port: int = Field(default=DEFAULT_PORT, gt=0, lt=65536)
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)
    read_timeout: float = Field(default=DEFAULT_READ_TIMEOUT, gt=0)
    prompt: str = PROMPT
    login_prompt: str = LOGIN_PROMPT
    password_prompt: str = PASSWORD_PROMPT

    @field_validator("prompt")
    @classmethod
    def check_prompt(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"prompt is not a valid regular expression: {e}") from e
        return v

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        dotenv: bool = True,
        **overrides: object,
    ) -> SwitchSettings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            dotenv: Load a ``.env`` file into ``os.environ`` first.
            **overrides: Field values that win over the environment;
                ``None`` values are ignored.

        Raises:
            ConfigurationError: If a value is missing or invalid.
        """
        if dotenv and environ is None:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ

        values: dict[str, object] = {field: env[var] for var, field in ENV_VARS.items() if env.get(var)}
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except ValidationError as e:
            missing = [str(err["loc"][0]) for err in e.errors() if err["type"] == "missing"]
            if missing:
                raise ConfigurationError(f"Missing switch settings: {', '.join(missing)}") from e
            raise ConfigurationError(f"Invalid switch settings: {e}") from e
