"""Shared fixtures for the superstackctl test suite."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from superstackctl.config import SwitchSettings
from superstackctl.managers import SuperStackVLANManager
from superstackctl.session import Session

# ── console output samples ────────────────────────────────────────────

SUMMARY_OUTPUT = "VLAN ID  Name\n-------  ------------------------\n1        Default VLAN\n10       Engineering\n20       Sales\n"

DETAIL_OUTPUT = (
    "VLAN ID: 5  Name: Finance\n"
    "\n"
    "802.1Q VLAN ID: 5  Local ID: 3\n"
    "\n"
    "Unit  Untagged Ports  Tagged Ports\n"
    "1     3               1,2\n"
)


@pytest.fixture()
def summary_output():
    """Raw `bridge vlan summary all` output (echo and prompt already stripped)."""
    return SUMMARY_OUTPUT


@pytest.fixture()
def detail_output():
    """Raw `bridge vlan detail 5` output (echo and prompt already stripped)."""
    return DETAIL_OUTPUT


# ── transport / session mocks ─────────────────────────────────────────


@pytest.fixture()
def settings():
    """SwitchSettings for a test switch."""
    return SwitchSettings(address="192.168.1.2", username="admin", password="secret")


@pytest.fixture()
def mock_transport():
    """Mock of a BaseTransport with awaitable connect/login/execute/disconnect."""
    transport = MagicMock()
    transport.connect = AsyncMock()
    transport.login = AsyncMock()
    transport.execute = AsyncMock(return_value="")
    transport.disconnect = AsyncMock()
    return transport


@pytest.fixture()
def session(settings, mock_transport):
    """Session wired to ``mock_transport``, not yet connected."""
    return Session(settings, transport_factory=lambda s: mock_transport)


@pytest.fixture()
def connected_session(session):
    """Session that has completed connect() and login."""
    asyncio.run(session.connect())
    return session


@pytest.fixture()
def vlan_manager(connected_session):
    """SuperStackVLANManager on a connected session."""
    return SuperStackVLANManager(connected_session)
