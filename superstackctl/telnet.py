"""Telnet console transport for SuperStack switches."""

from __future__ import annotations

import asyncio
import re

import telnetlib3
from loguru import logger

from superstackctl.base.transport import BaseTransport
from superstackctl.exceptions import (
    AuthenticationError,
    CommandTimeoutError,
    NotConnectedError,
    SwitchConnectionError,
)

DEFAULT_PORT = 23
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 2.0
BUFFER_SIZE = 4096

# Menu prompt, matched against the last received line only:
# "Select menu option: " or "Select menu option (bridge/vlan): "
PROMPT = r"^Select menu option[^:\n]*: $"
LOGIN_PROMPT = "Login: "
PASSWORD_PROMPT = "Password: "


def _last_line(output: str) -> str:
    return output.rpartition("\n")[2]


class TelnetTransport(BaseTransport):
    """Telnet transport for the SuperStack line console.

    A response ends when its last line matches the menu prompt pattern, so
    ``": "`` inside report lines never cuts it short. The echoed command line
    and the trailing prompt line are removed, so the first returned line is
    the first line the switch printed for the command.
    """

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        prompt: str = PROMPT,
        login_prompt: str = LOGIN_PROMPT,
        password_prompt: str = PASSWORD_PROMPT,
    ):
        super().__init__(host, port)
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.prompt = prompt
        self.login_prompt = login_prompt
        self.password_prompt = password_prompt
        self._prompt_pattern = re.compile(prompt)
        self._login_pattern = re.compile(re.escape(login_prompt) + "$")
        self._password_pattern = re.compile(re.escape(password_prompt) + "$")
        # After the password the switch shows either the menu or the login again
        self._post_login_pattern = re.compile(f"(?:{prompt})|(?:{re.escape(login_prompt)}$)")
        self._reader: telnetlib3.TelnetReaderUnicode | None = None
        self._writer: telnetlib3.TelnetWriterUnicode | None = None

    async def connect(self) -> None:
        """Open the telnet connection within ``connect_timeout``."""
        try:
            self._reader, self._writer = await asyncio.wait_for(
                telnetlib3.open_connection(self.host, self.port or DEFAULT_PORT, encoding="utf8"),
                timeout=self.connect_timeout,
            )
        except TimeoutError as e:
            raise SwitchConnectionError(
                f"Telnet connection to {self.host} timed out after {self.connect_timeout}s"
            ) from e
        except OSError as e:
            raise SwitchConnectionError(f"Telnet connection to {self.host} failed: {e}") from e

        logger.info("Telnet connected to {}:{}", self.host, self.port)

    async def login(self, username: str, password: str) -> None:
        """Answer the login/password prompt pair and wait for the menu prompt.

        Raises:
            AuthenticationError: If a prompt does not appear in time, or the
                switch asks for the login again.
        """
        self._ensure_connected()
        try:
            await self._read_until(self._login_pattern)
            self._send(username)
            await self._read_until(self._password_pattern)
            self._send(password)
            output = await self._read_until(self._post_login_pattern)
        except CommandTimeoutError as e:
            raise AuthenticationError(f"Login prompt sequence not observed on {self.host}") from e

        if not self._prompt_pattern.search(_last_line(output)):
            raise AuthenticationError(f"Login as {username!r} rejected by {self.host}")

        logger.info("Logged in to {} as {}", self.host, username)

    async def execute(self, command: str) -> str:
        """Send a command line and return its output.

        Args:
            command: Console command; an empty string sends a blank line.

        Returns:
            Output between the echoed command and the next prompt line.
        """
        self._ensure_connected()
        self._send(command)
        output = await self._read_until(self._prompt_pattern, command=command)

        lines = output.split("\n")
        # Strip the echoed command from output
        if command and lines and command in lines[0]:
            lines = lines[1:]
        # Strip trailing prompt line
        if lines and self._prompt_pattern.search(lines[-1]):
            lines = lines[:-1]

        return "\n".join(lines)

    async def disconnect(self) -> None:
        """Close the telnet connection."""
        if self._writer is not None:
            try:
                self._writer.close()
            except OSError as e:
                logger.debug("Ignoring error while closing telnet connection: {}", e)
        self._writer = None
        self._reader = None

    def is_connected(self) -> bool:
        """Check if the telnet stream is open."""
        return self._reader is not None and self._writer is not None and not self._reader.at_eof()

    def _send(self, line: str) -> None:
        assert self._writer is not None
        logger.debug("-> {!r}", line)
        self._writer.write(line + "\r\n")

    async def _read_until(self, pattern: re.Pattern[str], command: str | None = None) -> str:
        """Read until the last received line matches ``pattern``.

        Raises:
            CommandTimeoutError: If ``read_timeout`` elapses first.
            SwitchConnectionError: If the switch closes the connection.
        """
        try:
            output = await asyncio.wait_for(self._collect(pattern), timeout=self.read_timeout)
        except TimeoutError as e:
            raise CommandTimeoutError(
                f"No {pattern.pattern!r} prompt from {self.host} within {self.read_timeout}s",
                command=command,
            ) from e
        logger.debug("<- {!r}", output)
        return output

    async def _collect(self, pattern: re.Pattern[str]) -> str:
        assert self._reader is not None
        received = ""
        output = ""
        while not pattern.search(_last_line(output)):
            chunk = await self._reader.read(BUFFER_SIZE)
            if not chunk:
                raise SwitchConnectionError(f"Connection closed by {self.host}")
            # Normalise the whole buffer, a CRLF pair may straddle two chunks.
            received += chunk
            output = received.replace("\x00", "").replace("\r\n", "\n").replace("\r", "\n")
        return output

    def _ensure_connected(self) -> None:
        if not self.is_connected():
            raise NotConnectedError("Not connected. Call connect() first.")
