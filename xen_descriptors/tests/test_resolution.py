import unittest

import XenAPI

from xen_descriptors import (
    Connection,
    MissingIdentifierError,
    NetworkDescriptor,
    NotFoundError,
    PIFDescriptor,
    SRDescriptor,
    VDIDescriptor,
    VIFDescriptor,
    VLANDescriptor,
    VMDescriptor,
)
from xen_descriptors.tests.fakes import (
    FakeSession,
    FakeXenAPIServer,
    network_record,
)


class NameAndUUIDResolutionTests(unittest.TestCase):
    def setUp(self):
        self.server = FakeXenAPIServer()
        self.conn = Connection(FakeSession(self.server))

    def test_missing_name_reports_name(self):
        with self.assertRaises(NotFoundError) as ctx:
            NetworkDescriptor(name="prod-net").load(self.conn)

        self.assertIn("prod-net", str(ctx.exception))
        self.assertEqual(ctx.exception.kind, "Network")
        self.assertEqual(ctx.exception.error_code, "NOT_FOUND")

    def test_name_lookup_takes_first_match(self):
        self.server.add("network", "OpaqueRef:net-a", network_record(uuid="uuid-a", name_label="dup"))
        self.server.add("network", "OpaqueRef:net-b", network_record(uuid="uuid-b", name_label="dup"))

        network = NetworkDescriptor(name="dup").load(self.conn)

        self.assertEqual(network.ref, "OpaqueRef:net-a")
        self.assertEqual(network.uuid, "uuid-a")

    def test_name_wins_over_uuid(self):
        self.server.add("network", "OpaqueRef:net-a", network_record(uuid="uuid-a", name_label="a"))
        self.server.add("network", "OpaqueRef:net-b", network_record(uuid="uuid-b", name_label="b"))

        network = NetworkDescriptor(name="a", uuid="uuid-b").load(self.conn)

        self.assertEqual(network.ref, "OpaqueRef:net-a")
        self.assertNotIn("network.get_by_uuid", self.server.methods_called())

    def test_uuid_used_when_name_empty(self):
        self.server.add("network", "OpaqueRef:net-a", network_record(uuid="uuid-a", name_label="a"))

        network = NetworkDescriptor(uuid="uuid-a").load(self.conn)

        self.assertEqual(network.ref, "OpaqueRef:net-a")
        self.assertEqual(network.name, "a")
        self.assertEqual(self.server.methods_called(), ["network.get_by_uuid", "network.get_record"])

    def test_no_identifier_issues_no_call(self):
        for cls in (NetworkDescriptor, VMDescriptor, SRDescriptor, VDIDescriptor):
            with self.assertRaises(MissingIdentifierError) as ctx:
                cls().load(self.conn)
            self.assertEqual(ctx.exception.fields, ["name", "uuid"])
            self.assertIn('"name"', str(ctx.exception))
            self.assertIn('"uuid"', str(ctx.exception))

        self.assertEqual(self.server.calls, [])

    def test_uuid_only_kinds_require_uuid(self):
        for cls in (VIFDescriptor, PIFDescriptor, VLANDescriptor):
            with self.assertRaises(MissingIdentifierError) as ctx:
                cls().load(self.conn)
            self.assertEqual(ctx.exception.fields, ["uuid"])

        self.assertEqual(self.server.calls, [])

    def test_unknown_uuid_propagates_failure_unchanged(self):
        with self.assertRaises(XenAPI.Failure) as ctx:
            PIFDescriptor(uuid="nope").load(self.conn)

        self.assertEqual(ctx.exception.details[0], "UUID_INVALID")

    def test_lookup_failure_propagates(self):
        error = XenAPI.Failure(["SESSION_INVALID", "OpaqueRef:session"])
        self.server.fail("network", "get_by_name_label", error)

        with self.assertRaises(XenAPI.Failure) as ctx:
            NetworkDescriptor(name="prod-net").load(self.conn)

        self.assertIs(ctx.exception, error)


class NetworkQueryTests(unittest.TestCase):
    def setUp(self):
        self.server = FakeXenAPIServer()
        self.conn = Connection(FakeSession(self.server))
        self.server.add("network", "OpaqueRef:net-1", network_record())

    def test_fields_mapped(self):
        network = NetworkDescriptor(ref="OpaqueRef:net-1").query(self.conn)

        self.assertEqual(network.uuid, "net-uuid-1")
        self.assertEqual(network.name, "prod-net")
        self.assertEqual(network.description, "Production network")
        self.assertEqual(network.bridge, "xenbr0")
        self.assertEqual(network.mtu, 1500)

    def test_query_overwrites_previous_values(self):
        network = NetworkDescriptor(ref="OpaqueRef:net-1", name="stale", bridge="old", mtu=9000)

        network.query(self.conn)

        self.assertEqual(network.name, "prod-net")
        self.assertEqual(network.bridge, "xenbr0")
        self.assertEqual(network.mtu, 1500)

    def test_query_is_idempotent(self):
        network = NetworkDescriptor(ref="OpaqueRef:net-1")

        first = network.query(self.conn).model_dump()
        second = network.query(self.conn).model_dump()

        self.assertEqual(first, second)

    def test_stale_reference_fails(self):
        with self.assertRaises(XenAPI.Failure) as ctx:
            NetworkDescriptor(ref="OpaqueRef:gone").query(self.conn)

        self.assertEqual(ctx.exception.details[0], "HANDLE_INVALID")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
