"""Data models for SuperStack VLAN control."""

from superstackctl.models.vlan import Vlan, VlanDetails

__all__ = [
    "Vlan",
    "VlanDetails",
]
