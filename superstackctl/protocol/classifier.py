"""Response classification by error marker.

The switch has no structured error channel: failures are sentences inside
the console text. Each operation kind has an ordered tuple of
:class:`ErrorRule`; the first rule whose marker occurs in the response
decides the error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from superstackctl.exceptions import (
    PortNotFoundError,
    SwitchError,
    VlanAlreadyExistsError,
    VlanNotFoundError,
)


class Operation(Enum):
    """VLAN operation kinds, used to select the error rules."""

    LIST_VLANS = "list_vlans"
    SHOW_VLAN = "show_vlan"
    CREATE_VLAN = "create_vlan"
    DELETE_VLAN = "delete_vlan"
    RENAME_VLAN = "rename_vlan"
    ADD_PORT = "add_port"
    REMOVE_PORT = "remove_port"


@dataclass(frozen=True)
class ErrorRule:
    """Substring marker and the error it maps to.

    ``marker`` is a ``str.format`` template over ``vlan_id`` and ``port``.
    ``recover`` tells whether the switch is left in its inline edit state
    and needs the recovery command before the next command.
    """

    marker: str
    error: Callable[..., SwitchError]
    recover: bool = True

    def render(self, vlan_id: int | None = None, port: int | None = None) -> str:
        return self.marker.format(vlan_id=vlan_id, port=port)


@dataclass(frozen=True)
class Accepted:
    """No known error marker was found."""


@dataclass(frozen=True)
class Rejected:
    """A marker matched; ``error`` is ready to raise."""

    rule: ErrorRule
    error: SwitchError

    @property
    def needs_recovery(self) -> bool:
        return self.rule.recover


Verdict = Accepted | Rejected


_VLAN_INVALID = ErrorRule('"{vlan_id}" is invalid.', lambda vlan_id, port: VlanNotFoundError(vlan_id))
_PORT_INVALID = ErrorRule('"1:{port}" is invalid.', lambda vlan_id, port: PortNotFoundError(port))

ERROR_RULES: dict[Operation, tuple[ErrorRule, ...]] = {
    Operation.LIST_VLANS: (),
    Operation.SHOW_VLAN: (ErrorRule("is invalid.", lambda vlan_id, port: VlanNotFoundError(vlan_id)),),
    Operation.CREATE_VLAN: (
        ErrorRule(
            "VLAN ID in use by another VLAN.",
            lambda vlan_id, port: VlanAlreadyExistsError(vlan_id),
            recover=False,
        ),
    ),
    Operation.DELETE_VLAN: (_VLAN_INVALID,),
    Operation.RENAME_VLAN: (_VLAN_INVALID,),
    # VLAN before port: a response carrying both markers is a missing VLAN.
    Operation.ADD_PORT: (_VLAN_INVALID, _PORT_INVALID),
    Operation.REMOVE_PORT: (_VLAN_INVALID, _PORT_INVALID),
}


def classify(
    operation: Operation,
    response: str,
    vlan_id: int | None = None,
    port: int | None = None,
) -> Verdict:
    """Match ``response`` against the rules of ``operation`` in order."""
    for rule in ERROR_RULES[operation]:
        if rule.render(vlan_id=vlan_id, port=port) in response:
            return Rejected(rule=rule, error=rule.error(vlan_id, port))
    return Accepted()
