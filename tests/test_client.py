"""Tests for the SuperStackSwitch client."""

from __future__ import annotations

import asyncio

from superstackctl.client import SuperStackSwitch
from superstackctl.config import SwitchSettings
from superstackctl.managers import SuperStackVLANManager
from superstackctl.models.vlan import Vlan


class TestSuperStackSwitch:
    """Test SuperStackSwitch wiring and context management."""

    def test_init_builds_settings(self):
        switch = SuperStackSwitch(host="10.0.0.2", username="admin", password="pw", read_timeout=3.0)

        assert switch.host == "10.0.0.2"
        assert switch.settings.read_timeout == 3.0
        assert switch.session.is_connected is False

    def test_from_settings(self, mock_transport):
        settings = SwitchSettings(address="10.0.0.2", username="admin", password="pw", port=2323)

        switch = SuperStackSwitch.from_settings(settings, transport_factory=lambda s: mock_transport)

        assert switch.settings == settings

    def test_vlan_manager_is_cached(self):
        switch = SuperStackSwitch(host="10.0.0.2", username="admin", password="pw")

        assert isinstance(switch.vlan, SuperStackVLANManager)
        assert switch.vlan is switch.vlan

    def test_async_context_manager(self, mock_transport, summary_output):
        mock_transport.execute.return_value = summary_output
        switch = SuperStackSwitch(
            host="10.0.0.2",
            username="admin",
            password="pw",
            transport_factory=lambda s: mock_transport,
        )

        async def scenario():
            async with switch as sw:
                return await sw.vlan.list_vlans()

        vlans = asyncio.run(scenario())

        assert vlans[1] == Vlan(10, "Engineering")
        mock_transport.connect.assert_awaited_once()
        mock_transport.login.assert_awaited_once_with("admin", "pw")
        mock_transport.disconnect.assert_awaited_once()
        assert switch.session.is_connected is False
