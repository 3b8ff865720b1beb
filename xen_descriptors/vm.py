"""
VM descriptor.

Besides resolve/populate, a VM supports two narrow push operations:

- update_memory: static/dynamic memory limits in one call
- update_vcpus: VCPUs_max then VCPUs_at_startup, two separate calls
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, Field

from .base import NamedDescriptor, as_int, as_str_map, memory_pair
from .constants import XENAPI_VM

logger = logging.getLogger(__name__)


class MemoryRange(BaseModel):
    """Memory (min, max) pair in bytes."""
    min: int = 0
    max: int = 0


class VMDescriptor(NamedDescriptor):
    """XenAPI VM, resolvable by name label or UUID."""

    xenapi_class = XENAPI_VM
    kind = "VM"

    power_state: str = ""
    is_pv: bool = False
    static_memory: MemoryRange = Field(default_factory=MemoryRange)
    dynamic_memory: MemoryRange = Field(default_factory=MemoryRange)
    vcpu_count: int = 0
    vif_count: int = 0
    vbd_count: int = 0
    pci_count: int = 0
    other_config: Dict[str, str] = {}
    xenstore_data: Dict[str, str] = {}
    hvm_boot_parameters: Dict[str, str] = {}
    platform: Dict[str, str] = {}
    is_a_template: bool = False

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        self.uuid = record["uuid"]
        self.name = record["name_label"]
        self.description = record["name_description"]
        self.power_state = record["power_state"]
        self.is_pv = record["PV_bootloader"] != ""
        self.vcpu_count = as_int(record["VCPUs_max"])

        static_min, static_max = memory_pair(record, "memory_static")
        self.static_memory = MemoryRange(min=static_min, max=static_max)
        dynamic_min, dynamic_max = memory_pair(record, "memory_dynamic")
        self.dynamic_memory = MemoryRange(min=dynamic_min, max=dynamic_max)

        self.vif_count = len(record["VIFs"])
        self.vbd_count = len(record["VBDs"])
        self.pci_count = len(record["attached_PCIs"])
        self.other_config = as_str_map(record["other_config"])
        self.xenstore_data = as_str_map(record["xenstore_data"])
        self.hvm_boot_parameters = as_str_map(record["HVM_boot_params"])
        self.is_a_template = bool(record["is_a_template"])

        # platform is fetched separately from the main record
        self.platform = as_str_map(conn.call(self.xenapi_class, "get_platform", self.ref))

    def update_memory(self, conn) -> None:
        """
        Push static and dynamic memory limits in a single call.
        """
        logger.info(
            f"Setting memory limits of VM {self.ref}: static {self.static_memory.min}-{self.static_memory.max}, "
            f"dynamic {self.dynamic_memory.min}-{self.dynamic_memory.max}"
        )
        conn.call(self.xenapi_class, "set_memory_limits", self.ref,
                  str(self.static_memory.min),
                  str(self.static_memory.max),
                  str(self.dynamic_memory.min),
                  str(self.dynamic_memory.max))

    def update_vcpus(self, conn) -> None:
        """
        Push vcpu_count as VCPUs_max, then as VCPUs_at_startup.

        If the first call fails the second is not attempted; there is no
        rollback of a successful first call.
        """
        logger.info(f"Setting VCPUs of VM {self.ref} to {self.vcpu_count}")
        conn.call(self.xenapi_class, "set_VCPUs_max", self.ref, str(self.vcpu_count))
        conn.call(self.xenapi_class, "set_VCPUs_at_startup", self.ref, str(self.vcpu_count))
