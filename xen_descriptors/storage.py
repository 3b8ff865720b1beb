"""
Storage descriptors: SR (storage repository) and VDI (virtual disk).
"""

import logging
from typing import Any, Dict, Optional

from .base import NamedDescriptor, NestedPolicy, as_int
from .config import settings
from .constants import XENAPI_SR, XENAPI_VDI

logger = logging.getLogger(__name__)


class SRDescriptor(NamedDescriptor):
    """
    XenAPI storage repository, resolvable by name label or UUID.

    `host` has no counterpart in the SR record and is never overwritten.
    """

    xenapi_class = XENAPI_SR
    kind = "Storage repository"

    host: str = ""
    type: str = ""
    content_type: str = ""
    shared: bool = False

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
        self.name = record["name_label"]
        self.description = record["name_description"]
        self.shared = bool(record["shared"])
        self.type = record["type"]
        self.content_type = record["content_type"]

        if settings.log_sm_config:
            logger.debug(f"SR {self.uuid} sm_config: {record.get('sm_config', {})}")


class VDIDescriptor(NamedDescriptor):
    """
    XenAPI virtual disk image, resolvable by name label or UUID.

    The containing SR is re-fetched on every query.
    """

    xenapi_class = XENAPI_VDI
    kind = "VDI"
    nested_policies = {
        "sr": NestedPolicy.ALWAYS_REFRESH,
    }

    sr: Optional[SRDescriptor] = None
    is_shared: bool = False
    is_read_only: bool = False
    size: int = 0

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
        self.name = record["name_label"]
        self.description = record["name_description"]
        self.is_read_only = bool(record["read_only"])
        self.is_shared = bool(record["sharable"])
        self.size = as_int(record["virtual_size"])

        self.sr = self._populate_nested("sr", self.sr, SRDescriptor, record["SR"], conn)
