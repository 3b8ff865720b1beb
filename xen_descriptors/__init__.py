"""
XenAPI Descriptor Layer

Local descriptors mirroring XenServer / XCP-ng objects (VM, network, SR, VDI,
VIF, VBD, PIF, VLAN). Each descriptor can be:
- resolved from a name label or UUID to an opaque reference (load)
- populated from the remote record (query)
- for VM and VBD, pushed back to the remote object

All remote calls go through a Connection wrapping an authenticated
XenAPI session.
"""

__version__ = "1.0.0"

import logging
from typing import Optional

from .config import settings
from .connection import Connection
from .base import Descriptor, NamedDescriptor, NestedPolicy
from .errors import (
    XenDescriptorError,
    MissingIdentifierError,
    NotFoundError,
    describe_failure,
)
from .constants import VMPowerState, VBDMode, VBDType
from .network import NetworkDescriptor
from .vm import MemoryRange, VMDescriptor
from .vif import VIFDescriptor
from .storage import SRDescriptor, VDIDescriptor
from .vbd import VBDDescriptor
from .pif import PIFDescriptor
from .vlan import VLANDescriptor


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts using this library."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


__all__ = [
    "settings",
    "configure_logging",
    "Connection",
    "Descriptor",
    "NamedDescriptor",
    "NestedPolicy",
    "XenDescriptorError",
    "MissingIdentifierError",
    "NotFoundError",
    "describe_failure",
    "VMPowerState",
    "VBDMode",
    "VBDType",
    "NetworkDescriptor",
    "MemoryRange",
    "VMDescriptor",
    "VIFDescriptor",
    "SRDescriptor",
    "VDIDescriptor",
    "VBDDescriptor",
    "PIFDescriptor",
    "VLANDescriptor",
]
