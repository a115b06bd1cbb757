"""Command strings of the SuperStack ``bridge vlan`` menu.

The strings are matched character for character by the switch.
"""

from __future__ import annotations

# Stacking unit that owns the ports addressed by ``unit:port``.
UNIT = 1

# A blank line leaves the inline edit state the switch enters after it
# rejects an argument.
RECOVERY_COMMAND = ""


def port_ref(port: int) -> str:
    return f"{UNIT}:{port}"


def list_vlans() -> str:
    return "bridge vlan summary all"


def show_vlan(vlan_id: int) -> str:
    return f"bridge vlan detail {vlan_id}"


def create_vlan(vlan_id: int, name: str) -> str:
    return f"bridge vlan create {vlan_id} {name}"


def delete_vlan(vlan_id: int) -> str:
    return f"bridge vlan delete {vlan_id} yes"


def rename_vlan(vlan_id: int, name: str) -> str:
    return f"bridge vlan modify name {vlan_id} {name}"


def add_port(vlan_id: int, port: int, tagged: bool) -> str:
    mode = "tagged" if tagged else "untagged"
    return f"bridge vlan modify addPort {vlan_id} {port_ref(port)} {mode}"


def remove_port(vlan_id: int, port: int) -> str:
    # Same verb as add_port without the mode suffix; no distinct remove
    # command has been confirmed on the device.
    return f"bridge vlan modify addPort {vlan_id} {port_ref(port)}"
