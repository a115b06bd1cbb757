"""Abstract base manager classes for switch operations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from superstackctl.models.vlan import Vlan, VlanDetails


class BaseVLANManager(ABC):
    """Abstract base class for VLAN management."""

    @abstractmethod
    async def list_vlans(self) -> list[Vlan]:
        """List all configured VLANs."""

    @abstractmethod
    async def show_vlan(self, vlan_id: int) -> VlanDetails:
        """Get a VLAN with its tagged and untagged ports."""

    @abstractmethod
    async def create_vlan(self, vlan_id: int, name: str) -> None:
        """Create a new VLAN."""

    @abstractmethod
    async def delete_vlan(self, vlan_id: int) -> None:
        """Delete a VLAN."""

    @abstractmethod
    async def rename_vlan(self, vlan_id: int, name: str) -> None:
        """Change the name of a VLAN."""

    @abstractmethod
    async def add_port(self, vlan_id: int, port: int, tagged: bool = False) -> None:
        """Add a port to a VLAN as tagged or untagged member."""

    @abstractmethod
    async def remove_port(self, vlan_id: int, port: int) -> None:
        """Remove a port from a VLAN."""
