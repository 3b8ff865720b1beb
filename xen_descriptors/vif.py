"""
VIF (virtual network interface) descriptor.
"""

import re
from typing import Any, Dict, Optional

from .base import Descriptor, NestedPolicy, as_int, as_str_map
from .constants import XENAPI_VIF
from .network import NetworkDescriptor
from .vm import VMDescriptor

# optional sign followed by ASCII digits only
DEVICE_ORDER_RE = re.compile(r"^[+-]?[0-9]+\Z")


class VIFDescriptor(Descriptor):
    """
    XenAPI VIF, resolvable by UUID only.

    The attached network and VM are queried only when not already set.
    """

    xenapi_class = XENAPI_VIF
    kind = "VIF"
    nested_policies = {
        "network": NestedPolicy.REUSE_IF_PRESENT,
        "vm": NestedPolicy.REUSE_IF_PRESENT,
    }

    network: Optional[NetworkDescriptor] = None
    vm: Optional[VMDescriptor] = None
    mtu: int = 0
    mac: str = ""
    is_autogenerated_mac: bool = False
    device_order: int = 0
    other_config: Dict[str, str] = {}

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
        self.mtu = as_int(record["MTU"])

        # best effort: a non-numeric device yields order 0
        self.device_order = 0
        device = record["device"]
        if isinstance(device, str) and DEVICE_ORDER_RE.match(device):
            self.device_order = int(device)
        else:
            self._soft_warning(f"Cannot parse device {device!r} as device order")

        self.is_autogenerated_mac = bool(record["MAC_autogenerated"])
        self.mac = record["MAC"]
        self.other_config = as_str_map(record["other_config"])

        self.network = self._populate_nested("network", self.network, NetworkDescriptor, record["network"], conn)
        self.vm = self._populate_nested("vm", self.vm, VMDescriptor, record["VM"], conn)
