"""Exception hierarchy for SuperStack VLAN control."""


class SwitchError(Exception):
    """Base exception for all switch management errors."""


class SwitchConnectionError(SwitchError):
    """Telnet connection could not be established or was lost."""


class AuthenticationError(SwitchError):
    """Login rejected, or the login prompt sequence was not observed."""


class NotConnectedError(SwitchError):
    """Command attempted on a session that is not connected."""


class CommandTimeoutError(SwitchError):
    """No response boundary (prompt) was seen within the read timeout."""

    def __init__(self, message: str, command: str | None = None):
        self.command = command
        super().__init__(message)


class ParseError(SwitchError):
    """Console output did not have the expected report shape."""


class ConfigurationError(SwitchError):
    """Connection settings are missing or invalid."""


class VLANError(SwitchError):
    """VLAN operation failed."""


class VlanNotFoundError(VLANError):
    """The switch rejected the VLAN id as invalid."""

    def __init__(self, vlan_id: int):
        self.vlan_id = vlan_id
        super().__init__(f"VLAN with id {vlan_id} not found")


class VlanAlreadyExistsError(VLANError):
    """The VLAN id is already in use by another VLAN."""

    def __init__(self, vlan_id: int):
        self.vlan_id = vlan_id
        super().__init__(f"VLAN with id {vlan_id} already exists")


class PortError(SwitchError):
    """Port configuration failed."""


class PortNotFoundError(PortError):
    """The switch rejected the port as invalid."""

    def __init__(self, port: int):
        self.port = port
        super().__init__(f"Port {port} not found")
