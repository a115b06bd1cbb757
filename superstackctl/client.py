"""SuperStack switch client (telnet console only)."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Self

from superstackctl.config import SwitchSettings
from superstackctl.managers import SuperStackVLANManager
from superstackctl.session import Session, TransportFactory, telnet_transport


class SuperStackSwitch:
    """Client for 3Com SuperStack-style switches managed over telnet.

    Usage::

        async with SuperStackSwitch(
            host="192.168.1.2",
            username="admin",
            password="mypass",
        ) as switch:
            for vlan in await switch.vlan.list_vlans():
                print(vlan.vlan_id, vlan.name)
    """

    def __init__(
        self,
        host: str,
        username: str,
        password: str,
        transport_factory: TransportFactory = telnet_transport,
        **kwargs: Any,
    ) -> None:
        self.host = host
        self.settings = SwitchSettings(address=host, username=username, password=password, **kwargs)
        self.session = Session(self.settings, transport_factory=transport_factory)

        # Lazy-initialized managers
        self._vlan: SuperStackVLANManager | None = None

    @classmethod
    def from_settings(
        cls,
        settings: SwitchSettings,
        transport_factory: TransportFactory = telnet_transport,
    ) -> SuperStackSwitch:
        """Create a client from already validated settings."""
        return cls(
            host=settings.address,
            username=settings.username,
            password=settings.password.get_secret_value(),
            transport_factory=transport_factory,
            **settings.model_dump(exclude={"address", "username", "password"}),
        )

    @property
    def vlan(self) -> SuperStackVLANManager:
        """Access VLAN management."""
        if self._vlan is None:
            self._vlan = SuperStackVLANManager(self.session)
        return self._vlan

    async def connect(self) -> None:
        """Open the telnet session and log in."""
        await self.session.connect()

    async def disconnect(self) -> None:
        """Close the telnet session and clear manager references."""
        self._vlan = None
        await self.session.disconnect()

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        await self.disconnect()
