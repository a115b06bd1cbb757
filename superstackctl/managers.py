"""VLAN operations of the SuperStack ``bridge vlan`` menu."""

from __future__ import annotations

from loguru import logger

from superstackctl.base.managers import BaseVLANManager
from superstackctl.models.vlan import Vlan, VlanDetails
from superstackctl.protocol import commands
from superstackctl.protocol.classifier import Operation, Rejected, classify
from superstackctl.protocol.parsers import parse_vlan_details, parse_vlan_summary
from superstackctl.session import Session


class SuperStackVLANManager(BaseVLANManager):
    """VLAN configuration via the SuperStack telnet console.

    Each operation sends one command and checks the response for the error
    markers of its operation kind. When a marker leaves the console in its
    inline edit state, a blank recovery line is sent before the error is
    raised. The session is held for the whole exchange.
    """

    def __init__(self, session: Session):
        self._session = session

    async def list_vlans(self) -> list[Vlan]:
        """List all VLANs by parsing 'bridge vlan summary all' output."""
        output = await self._run(Operation.LIST_VLANS, commands.list_vlans())
        return parse_vlan_summary(output)

    async def show_vlan(self, vlan_id: int) -> VlanDetails:
        """Get VLAN details by parsing 'bridge vlan detail' output.

        Raises:
            VlanNotFoundError: If the switch rejects the VLAN id.
            ParseError: If the report does not have the expected layout.
        """
        output = await self._run(Operation.SHOW_VLAN, commands.show_vlan(vlan_id), vlan_id=vlan_id)
        return parse_vlan_details(output)

    async def create_vlan(self, vlan_id: int, name: str) -> None:
        """Create a new VLAN.

        Args:
            vlan_id: VLAN id, passed to the switch unchecked.
            name: VLAN name.

        Raises:
            VlanAlreadyExistsError: If the id is in use by another VLAN.
        """
        await self._run(Operation.CREATE_VLAN, commands.create_vlan(vlan_id, name), vlan_id=vlan_id)
        logger.info("Created VLAN {} ({})", vlan_id, name)

    async def delete_vlan(self, vlan_id: int) -> None:
        """Delete a VLAN.

        Raises:
            VlanNotFoundError: If the switch rejects the VLAN id.
        """
        await self._run(Operation.DELETE_VLAN, commands.delete_vlan(vlan_id), vlan_id=vlan_id)
        logger.info("Deleted VLAN {}", vlan_id)

    async def rename_vlan(self, vlan_id: int, name: str) -> None:
        """Rename a VLAN.

        Raises:
            VlanNotFoundError: If the switch rejects the VLAN id.
        """
        await self._run(Operation.RENAME_VLAN, commands.rename_vlan(vlan_id, name), vlan_id=vlan_id)
        logger.info("Renamed VLAN {} to {}", vlan_id, name)

    async def add_port(self, vlan_id: int, port: int, tagged: bool = False) -> None:
        """Add a port of unit 1 to a VLAN.

        Raises:
            VlanNotFoundError: If the switch rejects the VLAN id.
            PortNotFoundError: If the switch rejects the port.
        """
        await self._run(
            Operation.ADD_PORT,
            commands.add_port(vlan_id, port, tagged),
            vlan_id=vlan_id,
            port=port,
        )
        logger.info("Added port {} to VLAN {} ({})", port, vlan_id, "tagged" if tagged else "untagged")

    async def remove_port(self, vlan_id: int, port: int) -> None:
        """Remove a port of unit 1 from a VLAN.

        Sends ``addPort`` without a tagging mode, which is what the console
        dialect this client was written against uses; no separate removal
        verb has been confirmed on the device.

        Raises:
            VlanNotFoundError: If the switch rejects the VLAN id.
            PortNotFoundError: If the switch rejects the port.
        """
        logger.warning("remove_port uses the unconfirmed 'addPort' encoding without tagging mode")
        await self._run(
            Operation.REMOVE_PORT,
            commands.remove_port(vlan_id, port),
            vlan_id=vlan_id,
            port=port,
        )
        logger.info("Removed port {} from VLAN {}", port, vlan_id)

    async def _run(
        self,
        operation: Operation,
        command: str,
        vlan_id: int | None = None,
        port: int | None = None,
    ) -> str:
        """Execute ``command`` and raise the classified error, if any."""
        async with self._session.exclusive():
            output = await self._session.execute(command)
            verdict = classify(operation, output, vlan_id=vlan_id, port=port)
            if isinstance(verdict, Rejected):
                if verdict.needs_recovery:
                    await self._session.execute(commands.RECOVERY_COMMAND)
                logger.debug("{} rejected: {}", operation.value, verdict.error)
                raise verdict.error
        return output
