"""
Network descriptor.
"""

from typing import Any, Dict

from .base import NamedDescriptor, as_int
from .constants import XENAPI_NETWORK


class NetworkDescriptor(NamedDescriptor):
    """XenAPI network, resolvable by name label or UUID."""

    xenapi_class = XENAPI_NETWORK
    kind = "Network"

    bridge: str = ""
    mtu: int = 0

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
        self.name = record["name_label"]
        self.description = record["name_description"]
        self.mtu = as_int(record["MTU"])
        self.bridge = record["bridge"]
