"""Tests for NetworkTopology export, import and membership."""

import pytest
from pydantic import ValidationError

from subnet_topo import (
    DependencyList,
    ExportedTopology,
    MalformedImport,
    NetworkTopology,
    Subnet,
    SubnetType,
    TopologyMismatch,
)
from subnet_topo.core.models import Dependable


def _triples(topology, subnet_type):
    return [
        (s.subnet_id, s.availability_zone, s.name_or_default(subnet_type))
        for s in topology.subnets_of(subnet_type)
    ]


class TestExport:
    """Tests for NetworkTopology.export_to."""

    def test_export_fields(self, topology) -> None:
        """Non-empty groups export ids and names, empty groups are absent."""
        values = topology.export_to().to_values()
        assert values == {
            "vpcId": "vpc-123",
            "availabilityZones": ["us-east-1a", "us-east-1b"],
            "publicSubnetIds": ["pub-1", "pub-2"],
            "publicSubnetNames": ["Public", "Public"],
            "privateSubnetIds": ["priv-1", "priv-2"],
            "privateSubnetNames": ["Private", "Private"],
        }

    def test_mismatched_group_raises(self, zones) -> None:
        """A group that skips an AZ cannot be exported."""
        topology = NetworkTopology(
            vpc_id="vpc-1",
            availability_zones=zones,
            public_subnets=(Subnet(subnet_id="pub-1", availability_zone=zones[0]),),
        )
        with pytest.raises(TopologyMismatch):
            topology.export_to()

    def test_empty_zones_and_groups(self) -> None:
        """A network with no AZs and no subnets exports cleanly."""
        values = NetworkTopology(vpc_id="vpc-1", availability_zones=()).export_to().to_values()
        assert values == {"vpcId": "vpc-1", "availabilityZones": []}

    def test_scoped_export_uses_import_reference(self, topology) -> None:
        """With a scope the network id becomes an import reference."""
        exported = topology.export_to("network-stack")
        assert exported.vpc_id == "${ImportValue:network-stack:VpcId}"
        assert topology.outputs("network-stack") == {"network-stack:VpcId": "vpc-123"}


class TestImport:
    """Tests for NetworkTopology.import_from."""

    def test_private_only_scenario(self) -> None:
        """Private ids without names round out to canonical names."""
        topology = NetworkTopology.import_from(
            {"vpcId": "vpc-1", "availabilityZones": ["a", "b"], "privateSubnetIds": ["sub-1", "sub-2"]}
        )
        exported = topology.export_to()
        assert exported.private_subnet_ids == ("sub-1", "sub-2")
        assert exported.private_subnet_names == ("Private", "Private")
        assert exported.public_subnet_ids is None
        assert exported.isolated_subnet_ids is None

    def test_short_private_ids(self) -> None:
        """A private id list shorter than the AZ list is malformed."""
        with pytest.raises(MalformedImport) as exc_info:
            NetworkTopology.import_from(
                {"vpcId": "vpc-1", "availabilityZones": ["a", "b"], "privateSubnetIds": ["sub-1"]}
            )
        assert exc_info.value.field == "privateSubnetIds"

    def test_round_trip_equality(self, named_topology) -> None:
        """Importing an export reproduces the topology."""
        assert NetworkTopology.import_from(named_topology.export_to()) == named_topology

    def test_round_trip_triples(self, topology) -> None:
        """Default-named subnets keep the same id/AZ/name triples."""
        restored = NetworkTopology.import_from(topology.export_to())
        assert restored.availability_zones == topology.availability_zones
        for subnet_type in SubnetType:
            assert _triples(restored, subnet_type) == _triples(topology, subnet_type)
        assert restored.isolated_subnets == ()

    def test_unknown_field_rejected(self) -> None:
        """Value bags with unexpected keys fail validation."""
        with pytest.raises(ValidationError):
            ExportedTopology.from_values({"vpcId": "vpc-1", "availabilityZones": [], "extra": 1})


class TestMembership:
    """Tests for identity-based membership checks."""

    def test_own_subnet_is_member(self, topology) -> None:
        """A subnet taken from the topology is a member."""
        subnet = topology.public_subnets[0]
        assert topology.is_member(subnet, SubnetType.PUBLIC)
        assert topology.is_public_subnet(subnet)

    def test_lookalike_is_not_member(self, topology) -> None:
        """A structurally equal but separate subnet is not a member."""
        original = topology.public_subnets[0]
        lookalike = Subnet(
            subnet_id=original.subnet_id,
            availability_zone=original.availability_zone,
            group_name=original.group_name,
        )
        assert lookalike == original
        assert not topology.is_member(lookalike, SubnetType.PUBLIC)

    def test_member_of_other_group(self, topology) -> None:
        """A private subnet is not a public member."""
        assert not topology.is_public_subnet(topology.private_subnets[0])
        assert topology.is_member(topology.private_subnets[0], "private")

    def test_construction_keeps_subnet_objects(self, zones) -> None:
        """Subnets passed at construction are stored as-is."""
        subnet = Subnet.from_existing("sub-1", zones[0])
        topology = NetworkTopology(
            vpc_id="vpc-1", availability_zones=zones[:1], isolated_subnets=[subnet]
        )
        assert topology.isolated_subnets[0] is subnet


class TestImmutability:
    """Tests for post-construction immutability."""

    def test_fields_cannot_be_reassigned(self, topology) -> None:
        """Assigning to a field fails."""
        with pytest.raises(ValidationError):
            topology.vpc_id = "vpc-other"

    def test_groups_are_tuples(self, zones) -> None:
        """Lists given at construction are frozen into tuples."""
        topology = NetworkTopology(
            vpc_id="vpc-1",
            availability_zones=list(zones),
            private_subnets=[Subnet(subnet_id="a", availability_zone=zones[0])],
        )
        assert isinstance(topology.availability_zones, tuple)
        assert isinstance(topology.private_subnets, tuple)


class TestInternetDependency:
    """Tests for the internet dependency aggregate."""

    def test_wraps_collected_dependencies(self, zones) -> None:
        """internet_dependency exposes the collected handles."""
        gateway, attachment = object(), object()
        topology = NetworkTopology(
            vpc_id="vpc-1",
            availability_zones=zones,
            internet_dependencies=(gateway, attachment),
        )
        dependency = topology.internet_dependency()
        assert isinstance(dependency, DependencyList)
        assert dependency.dependency_elements == (gateway, attachment)
        assert len(dependency) == 2

    def test_empty_by_default(self, topology) -> None:
        """A network without internet connectivity has no dependencies."""
        assert topology.internet_dependency().dependency_elements == ()

    def test_aggregate_is_dependable(self, topology) -> None:
        """The aggregate and the subnets expose dependency elements."""
        assert isinstance(topology.internet_dependency(), Dependable)
        assert isinstance(topology.public_subnets[0], Dependable)


class TestOpaqueValues:
    """Tests for values carried through without interpretation."""

    def test_whitespace_survives_import(self) -> None:
        """Ids, zones and names keep surrounding whitespace."""
        topology = NetworkTopology.import_from(
            {
                "vpcId": " vpc-1",
                "availabilityZones": [" a"],
                "privateSubnetIds": ["sub-1 "],
                "privateSubnetNames": [" App "],
            }
        )
        subnet = topology.private_subnets[0]
        assert topology.vpc_id == " vpc-1"
        assert (subnet.subnet_id, subnet.availability_zone, subnet.group_name) == ("sub-1 ", " a", " App ")

    def test_whitespace_round_trip(self) -> None:
        """Exporting an import reproduces whitespace-bearing values exactly."""
        values = {
            "vpcId": "vpc-1",
            "availabilityZones": ["a ", " b"],
            "isolatedSubnetIds": [" iso-1", "iso-2 "],
            "isolatedSubnetNames": ["Db ", "Db "],
        }
        assert NetworkTopology.import_from(values).export_to().to_values() == values

    def test_empty_name_round_trip(self) -> None:
        """An empty group name is kept rather than replaced by the default."""
        values = {
            "vpcId": "vpc-1",
            "availabilityZones": ["a"],
            "privateSubnetIds": ["sub-1"],
            "privateSubnetNames": [""],
        }
        assert NetworkTopology.import_from(values).export_to().to_values() == values
