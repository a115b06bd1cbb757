"""Console session: connection lifecycle and serialized command execution."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Callable

from loguru import logger

from superstackctl.base.transport import BaseTransport
from superstackctl.config import SwitchSettings
from superstackctl.exceptions import (
    CommandTimeoutError,
    NotConnectedError,
    SwitchConnectionError,
)
from superstackctl.telnet import TelnetTransport


@dataclass(frozen=True)
class Disconnected:
    """No transport yet, or closed by :meth:`Session.disconnect`."""


@dataclass(frozen=True)
class Connected:
    """Logged in; ``transport`` is owned by the session."""

    transport: BaseTransport


@dataclass(frozen=True)
class Failed:
    """The transport timed out or dropped; the session must reconnect."""

    reason: str


SessionState = Disconnected | Connected | Failed

TransportFactory = Callable[[SwitchSettings], BaseTransport]


def telnet_transport(settings: SwitchSettings) -> BaseTransport:
    """Default transport factory: telnet with the settings' prompts and timeouts."""
    return TelnetTransport(
        host=settings.address,
        port=settings.port,
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        prompt=settings.prompt,
        login_prompt=settings.login_prompt,
        password_prompt=settings.password_prompt,
    )


class Session:
    """Exclusive owner of one console connection.

    Only one command is in flight at a time. :meth:`exclusive` lets a task
    keep the session across several commands (an operation plus its
    recovery command); :meth:`execute` calls made by that task inside the
    block do not wait on the lock again.

    Usage::

        session = Session(settings)
        await session.connect()
        output = await session.execute("bridge vlan summary all")
    """

    def __init__(
        self,
        settings: SwitchSettings,
        transport_factory: TransportFactory = telnet_transport,
    ) -> None:
        self.settings = settings
        self._transport_factory = transport_factory
        self._state: SessionState = Disconnected()
        self._lock = asyncio.Lock()
        self._owner: asyncio.Task | None = None  # type: ignore[type-arg]

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return isinstance(self._state, Connected)

    async def connect(self) -> None:
        """Open the transport and log in.

        Replaces a previous connection, including a failed one.

        Raises:
            SwitchConnectionError: If the switch is unreachable in time.
            AuthenticationError: If the login is rejected.
        """
        async with self.exclusive():
            await self._close()
            self._state = Disconnected()
            transport = self._transport_factory(self.settings)
            await transport.connect()
            try:
                await transport.login(self.settings.username, self.settings.password.get_secret_value())
            except Exception:
                await transport.disconnect()
                raise
            self._state = Connected(transport)
            logger.info("Session to {} ready", self.settings.address)

    async def disconnect(self) -> None:
        """Close the transport and return to the disconnected state."""
        async with self.exclusive():
            await self._close()
            self._state = Disconnected()

    async def execute(self, command: str) -> str:
        """Send one command and return the raw console output.

        Raises:
            NotConnectedError: If the session is not connected.
            CommandTimeoutError: If no prompt arrives within the read timeout.
            SwitchConnectionError: If the connection drops.
        """
        if self._owner is asyncio.current_task():
            return await self._execute(command)
        async with self.exclusive():
            return await self._execute(command)

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator[Session]:
        """Hold the session for the calling task until the block exits.

        Re-entrant for the owning task, so manager operations can run inside
        an outer ``exclusive()`` block.
        """
        if self._owner is asyncio.current_task():
            yield self
            return
        async with self._lock:
            self._owner = asyncio.current_task()
            try:
                yield self
            finally:
                self._owner = None

    async def _execute(self, command: str) -> str:
        state = self._state
        if isinstance(state, Disconnected):
            raise NotConnectedError("Session not connected. Call connect() first.")
        if isinstance(state, Failed):
            raise NotConnectedError(f"Session failed ({state.reason}). Call connect() to rebuild it.")

        try:
            return await state.transport.execute(command)
        except (CommandTimeoutError, SwitchConnectionError) as e:
            logger.warning("Session to {} failed on {!r}: {}", self.settings.address, command, e)
            self._state = Failed(str(e))
            await state.transport.disconnect()
            raise

    async def _close(self) -> None:
        if isinstance(self._state, Connected):
            await self._state.transport.disconnect()
