"""Abstract base transport for the switch console."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class BaseTransport(ABC):
    """Abstract base class for line-oriented console transports.

    A transport delivers one command at a time and returns the console text
    printed before the next prompt. It does not interpret that text.
    """

    def __init__(self, host: str, port: int | None = None):
        self.host = host
        self.port = port

    @abstractmethod
    async def connect(self) -> None:
        """Open the connection to the switch."""

    @abstractmethod
    async def login(self, username: str, password: str) -> None:
        """Answer the login and password prompts."""

    @abstractmethod
    async def execute(self, command: str) -> str:
        """Send one command line and return the output up to the next prompt."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection to the switch."""

    @abstractmethod
    def is_connected(self) -> bool:
        """Check if transport is currently connected."""

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        await self.disconnect()
