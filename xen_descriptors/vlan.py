"""
VLAN descriptor.
"""

from typing import Any, Dict

from pydantic import Field

from .base import Descriptor, NestedPolicy, as_int, as_str_map, nested_ref
from .constants import XENAPI_VLAN
from .pif import PIFDescriptor


class VLANDescriptor(Descriptor):
    """
    XenAPI VLAN, resolvable by UUID only.

    The tagged and untagged PIFs are queried only when the record carries a
    reference for them; an unset reference leaves an empty PIFDescriptor.
    """

    xenapi_class = XENAPI_VLAN
    kind = "VLAN"
    nested_policies = {
        "tagged_pif": NestedPolicy.ALWAYS_REFRESH,
        "untagged_pif": NestedPolicy.ALWAYS_REFRESH,
    }

    tag: int = 0
    tagged_pif: PIFDescriptor = Field(default_factory=PIFDescriptor)
    untagged_pif: PIFDescriptor = Field(default_factory=PIFDescriptor)
    other_config: Dict[str, str] = {}

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
        self.tag = as_int(record["tag"])
        self.other_config = as_str_map(record["other_config"])

        tagged_ref = nested_ref(record, "tagged_PIF")
        if tagged_ref:
            self.tagged_pif = self._populate_nested(
                "tagged_pif", self.tagged_pif, PIFDescriptor, tagged_ref, conn)
        else:
            self.tagged_pif = PIFDescriptor()

        untagged_ref = nested_ref(record, "untagged_PIF")
        if untagged_ref:
            self.untagged_pif = self._populate_nested(
                "untagged_pif", self.untagged_pif, PIFDescriptor, untagged_ref, conn)
        else:
            self.untagged_pif = PIFDescriptor()
