"""Abstract base classes for switch console access."""

from superstackctl.base.managers import BaseVLANManager
from superstackctl.base.transport import BaseTransport

__all__ = [
    "BaseTransport",
    "BaseVLANManager",
]
