"""Tests for superstackctl exception hierarchy."""

import pytest

from superstackctl.exceptions import (
    AuthenticationError,
    CommandTimeoutError,
    ConfigurationError,
    NotConnectedError,
    ParseError,
    PortError,
    PortNotFoundError,
    SwitchConnectionError,
    SwitchError,
    VLANError,
    VlanAlreadyExistsError,
    VlanNotFoundError,
)


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    def test_switch_error_inherits_from_exception(self):
        assert issubclass(SwitchError, Exception)
        assert str(SwitchError("test")) == "test"

    @pytest.mark.parametrize(
        "exc_cls",
        [
            SwitchConnectionError,
            AuthenticationError,
            NotConnectedError,
            CommandTimeoutError,
            ParseError,
            ConfigurationError,
            VLANError,
            PortError,
        ],
    )
    def test_inherits_from_switch_error(self, exc_cls):
        assert issubclass(exc_cls, SwitchError)
        exc = exc_cls("failed")
        assert isinstance(exc, SwitchError)
        assert str(exc) == "failed"

    def test_vlan_errors_inherit_from_vlan_error(self):
        assert issubclass(VlanNotFoundError, VLANError)
        assert issubclass(VlanAlreadyExistsError, VLANError)

    def test_port_not_found_inherits_from_port_error(self):
        assert issubclass(PortNotFoundError, PortError)


class TestTypedErrors:
    """Test the payload carried by typed errors."""

    def test_vlan_not_found(self):
        exc = VlanNotFoundError(5)
        assert exc.vlan_id == 5
        assert str(exc) == "VLAN with id 5 not found"

    def test_vlan_already_exists(self):
        exc = VlanAlreadyExistsError(10)
        assert exc.vlan_id == 10
        assert str(exc) == "VLAN with id 10 already exists"

    def test_port_not_found(self):
        exc = PortNotFoundError(20)
        assert exc.port == 20
        assert str(exc) == "Port 20 not found"

    def test_command_timeout_keeps_command(self):
        exc = CommandTimeoutError("no prompt", command="bridge vlan summary all")
        assert exc.command == "bridge vlan summary all"
        assert str(exc) == "no prompt"

    def test_command_timeout_without_command(self):
        assert CommandTimeoutError("no prompt").command is None
