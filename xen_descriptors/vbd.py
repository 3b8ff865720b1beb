"""
VBD (virtual block device) descriptor.

The template-device flag has no native XenAPI field. It lives in the VBD's
other_config map under a reserved key (settings.template_device_key), encoded
as "true"/"false". encode_template_flag / decode_template_flag are the only
places that know about that convention.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from .base import Descriptor, NestedPolicy, as_str_map
from .config import settings
from .constants import XENAPI_VBD, enum_value
from .storage import VDIDescriptor
from .vm import VMDescriptor

logger = logging.getLogger(__name__)

# Spellings accepted as booleans in other_config values
TRUE_STRINGS = frozenset(["1", "t", "T", "TRUE", "true", "True"])
FALSE_STRINGS = frozenset(["0", "f", "F", "FALSE", "false", "False"])


def parse_bool(value: str) -> bool:
    """
    Parse a boolean string.

    Raises:
        ValueError: If value is not one of the accepted spellings
    """
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    raise ValueError(f"invalid boolean value {value!r}")


def encode_template_flag(other_config: Dict[str, str], is_template_device: bool) -> Dict[str, str]:
    """Store the flag in other_config (in place) and return the map."""
    other_config[settings.template_device_key] = "true" if is_template_device else "false"
    return other_config


def decode_template_flag(other_config: Dict[str, str]) -> Tuple[bool, Optional[str]]:
    """
    Read the flag from other_config.

    Returns:
        Tuple of (flag, error message or None). A missing key is False with
        no error; an unparsable value is False with an error message.
    """
    key = settings.template_device_key
    if key not in other_config:
        return False, None

    value = other_config[key]
    try:
        return parse_bool(value), None
    except ValueError:
        return False, f"Cannot parse {key} as boolean value; got {value!r}"


class VBDDescriptor(Descriptor):
    """
    XenAPI VBD, resolvable by UUID only.

    The attached VM and VDI are re-fetched on every query.
    """

    xenapi_class = XENAPI_VBD
    kind = "VBD"
    nested_policies = {
        "vm": NestedPolicy.ALWAYS_REFRESH,
        "vdi": NestedPolicy.ALWAYS_REFRESH,
    }

    vm: Optional[VMDescriptor] = None
    vdi: Optional[VDIDescriptor] = None
    device: str = ""
    user_device: str = ""
    mode: str = ""
    type: str = ""
    bootable: bool = False
    other_config: Dict[str, str] = {}
    is_template_device: bool = False

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
        self.type = record["type"]
        self.device = record["device"]
        self.user_device = record["userdevice"]
        self.bootable = bool(record["bootable"])
        self.mode = record["mode"]
        self.other_config = as_str_map(record["other_config"])

        self.is_template_device, error = decode_template_flag(self.other_config)
        if error:
            self._soft_warning(error, level=logging.ERROR)

        self.vm = self._populate_nested("vm", self.vm, VMDescriptor, record["VM"], conn)
        self.vdi = self._populate_nested("vdi", self.vdi, VDIDescriptor, record["VDI"], conn)

    def commit(self, conn) -> None:
        """
        Push bootable, mode and other_config (carrying the template flag).

        Each push is a separate call; the first failure aborts the rest and
        earlier pushes stay applied.
        """
        conn.call(self.xenapi_class, "set_bootable", self.ref, self.bootable)
        conn.call(self.xenapi_class, "set_mode", self.ref, enum_value(self.mode))

        encode_template_flag(self.other_config, self.is_template_device)
        conn.call(self.xenapi_class, "set_other_config", self.ref, self.other_config)

        logger.info(f"VBD {self.ref} committed")
