"""
Descriptor base classes.

A descriptor is a local snapshot of one remote XenAPI object plus the opaque
reference used to address it. Every descriptor follows the same two-phase
contract:

- load(conn): resolve a human identifier (name or UUID) to a reference,
  then query
- query(conn): fetch the full record for the known reference and copy every
  mapped field, fully overwriting previous values

Nested descriptors are populated according to a per-relation NestedPolicy
declared on the owning class.
"""

import logging
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, Field

from .constants import is_null_ref
from .errors import MissingIdentifierError, NotFoundError

logger = logging.getLogger(__name__)

D = TypeVar('D', bound='Descriptor')


class NestedPolicy(str, Enum):
    """How a nested descriptor is handled when its owner is queried"""
    REUSE_IF_PRESENT = "reuse_if_present"   # query only when the field is unset
    ALWAYS_REFRESH = "always_refresh"       # build and query a fresh instance


class Descriptor(BaseModel):
    """
    Common resolve/populate contract for all descriptor kinds.

    Subclasses set `xenapi_class` and `kind` and implement `_apply_record`.
    """

    xenapi_class: ClassVar[str] = ""
    kind: ClassVar[str] = ""
    nested_policies: ClassVar[Dict[str, NestedPolicy]] = {}

    uuid: str = ""
    ref: str = ""
    soft_warnings: List[str] = Field(default_factory=list)

    def load(self: D, conn) -> D:
        """
        Resolve the descriptor's identifier to a reference, then query.

        Raises:
            MissingIdentifierError: No usable identifier is set
            NotFoundError: Name lookup returned no references
        """
        self.ref = self.resolve(conn)
        return self.query(conn)

    def resolve(self, conn) -> str:
        """Translate the UUID into a reference."""
        if not self.uuid:
            raise MissingIdentifierError(self.kind, ["uuid"])
        return conn.call(self.xenapi_class, "get_by_uuid", self.uuid)

    def query(self: D, conn) -> D:
        """
        Fetch the full record for `ref` and copy it into this descriptor.

        A failing nested query propagates; nothing is partially kept.
        """
        record = conn.call(self.xenapi_class, "get_record", self.ref)
        self.soft_warnings = []
        self._apply_record(record, conn)
        return self

    def _apply_record(self, record: Dict[str, Any], conn) -> None:
        raise NotImplementedError

    def _soft_warning(self, message: str, level: int = logging.WARNING) -> None:
        """Record a tolerated problem that did not fail the operation."""
        logger.log(level, f"{self.kind} {self.ref}: {message}")
        self.soft_warnings.append(message)

    def _populate_nested(self, relation: str, current: Optional['Descriptor'],
                         factory: Callable[..., 'Descriptor'], ref: str, conn) -> 'Descriptor':
        """
        Populate the nested descriptor for `relation` according to its policy.

        Args:
            relation: Field name of the nested descriptor
            current: Current value of that field
            factory: Descriptor class to build when a fresh instance is needed
            ref: Reference taken from the owner's record
            conn: Connection

        Returns:
            The descriptor to store in the field
        """
        policy = self.nested_policies.get(relation, NestedPolicy.ALWAYS_REFRESH)
        if policy is NestedPolicy.REUSE_IF_PRESENT and current is not None:
            return current

        nested = factory(ref=ref)
        nested.query(conn)
        return nested


class NamedDescriptor(Descriptor):
    """Descriptor that can also be resolved by its name label."""

    name: str = ""
    description: str = ""

    def resolve(self, conn) -> str:
        if self.name:
            refs = conn.call(self.xenapi_class, "get_by_name_label", self.name)
            if not refs:
                raise NotFoundError(self.kind, self.name)
            if len(refs) > 1:
                logger.debug(f"{len(refs)} {self.kind} objects named {self.name!r}, using {refs[0]}")
            return refs[0]

        if self.uuid:
            return conn.call(self.xenapi_class, "get_by_uuid", self.uuid)

        raise MissingIdentifierError(self.kind, ["name", "uuid"])


def as_int(value: Any) -> int:
    """XenAPI sends 64-bit integers as decimal strings over XML-RPC."""
    return int(value)


def as_str_map(value: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Copy of a XenAPI (string -> string) map."""
    return {str(k): str(v) for k, v in (value or {}).items()}


def memory_pair(record: Dict[str, Any], prefix: str) -> Tuple[int, int]:
    return as_int(record[f"{prefix}_min"]), as_int(record[f"{prefix}_max"])


def nested_ref(record: Dict[str, Any], key: str) -> str:
    """Reference stored under `key`, or "" when unset."""
    ref = record.get(key, "")
    return "" if is_null_ref(ref) else ref
