"""
PIF (physical interface) descriptor.
"""

from typing import Any, Dict

from .base import Descriptor
from .constants import XENAPI_PIF


class PIFDescriptor(Descriptor):
    """XenAPI PIF, resolvable by UUID only. Only the UUID is mapped."""

    xenapi_class = XENAPI_PIF
    kind = "PIF"

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
