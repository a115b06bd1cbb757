"""VLAN-related data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vlan:
    """One row of the ``bridge vlan summary`` report."""

    vlan_id: int
    name: str = ""


@dataclass(frozen=True)
class VlanDetails:
    """A VLAN with its port membership, from ``bridge vlan detail``.

    Port lists keep the order produced by range expansion; they are neither
    sorted nor deduplicated.
    """

    vlan_id: int
    name: str = ""
    untagged: list[int] = field(default_factory=list)
    tagged: list[int] = field(default_factory=list)
