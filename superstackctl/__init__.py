"""SuperStack VLAN control library.

Drives the VLAN menu of 3Com SuperStack-style switches over their telnet
console and turns the console text into typed models and exceptions.
"""

__version__ = "0.0.1"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from superstackctl.base.transport import BaseTransport  # noqa: E402
from superstackctl.client import SuperStackSwitch  # noqa: E402
from superstackctl.config import SwitchSettings  # noqa: E402
from superstackctl.exceptions import (  # noqa: E402
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
from superstackctl.models.vlan import Vlan, VlanDetails  # noqa: E402
from superstackctl.session import Session  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "BaseTransport",
    "Session",
    "SuperStackSwitch",
    "SwitchSettings",
    "Vlan",
    "VlanDetails",
    "SwitchError",
    "SwitchConnectionError",
    "AuthenticationError",
    "NotConnectedError",
    "CommandTimeoutError",
    "ParseError",
    "ConfigurationError",
    "VLANError",
    "VlanNotFoundError",
    "VlanAlreadyExistsError",
    "PortError",
    "PortNotFoundError",
]
