"""
XenAPI class names and enumerated values used by the descriptors.
"""

from enum import Enum


# XenAPI class names as exposed on session.xenapi
XENAPI_NETWORK = "network"
XENAPI_VM = "VM"
XENAPI_VIF = "VIF"
XENAPI_SR = "SR"
XENAPI_VDI = "VDI"
XENAPI_VBD = "VBD"
XENAPI_PIF = "PIF"
XENAPI_VLAN = "VLAN"

# XenAPI's representation of an unset reference
NULL_REF = "OpaqueRef:NULL"


class VMPowerState(str, Enum):
    HALTED = "Halted"
    PAUSED = "Paused"
    RUNNING = "Running"
    SUSPENDED = "Suspended"


class VBDMode(str, Enum):
    RO = "RO"
    RW = "RW"


class VBDType(str, Enum):
    CD = "CD"
    DISK = "Disk"
    FLOPPY = "Floppy"


def is_null_ref(ref) -> bool:
    """True for an empty reference or XenAPI's OpaqueRef:NULL"""
    return not ref or ref == NULL_REF


def enum_value(value):
    """Plain value of an enum member, or the value itself"""
    return value.value if isinstance(value, Enum) else value
