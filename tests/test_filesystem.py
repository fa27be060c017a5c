"""Tests for value file reading and writing."""

import anyio
import pytest

from subnet_topo.filesystem import (
    dump_values,
    load_exported,
    load_topology,
    parse_values,
    read_values,
    write_values,
)

VALUES = {
    "vpcId": "vpc-1",
    "availabilityZones": ["a", "b"],
    "privateSubnetIds": ["sub-1", "sub-2"],
}


class TestValueFiles:
    """Tests for reading and writing value bags."""

    @pytest.mark.parametrize("filename", ["bag.json", "bag.yaml", "nested/bag.yml"])
    def test_write_then_read(self, tmp_path, filename) -> None:
        """Written values read back unchanged."""
        path = tmp_path / filename
        result = anyio.run(write_values, path, VALUES)
        assert result.is_success
        assert result.value == path
        assert anyio.run(read_values, path) == VALUES

    def test_yaml_chosen_by_suffix(self, tmp_path) -> None:
        """YAML suffixes produce YAML text."""
        path = tmp_path / "bag.yaml"
        anyio.run(write_values, path, VALUES)
        assert path.read_text(encoding="utf-8").startswith("vpcId: vpc-1")

    def test_write_failure_returns_failure(self, tmp_path) -> None:
        """Unwritable targets produce a Failure result."""
        blocker = tmp_path / "file.txt"
        blocker.write_text("x")
        result = anyio.run(write_values, blocker / "bag.json", VALUES)
        assert not result.is_success
        assert result.error_code

    def test_non_mapping_rejected(self) -> None:
        """The top level of a value file must be a mapping."""
        with pytest.raises(ValueError):
            parse_values("[1, 2]", yaml_format=False)

    def test_dump_json(self) -> None:
        """JSON dumps keep key order."""
        assert dump_values({"b": 1, "a": 2}).index('"b"') < dump_values({"b": 1, "a": 2}).index('"a"')


class TestLoaders:
    """Tests for topology and export loaders."""

    def test_load_topology_description(self, tmp_path) -> None:
        """A description file builds a topology directly."""
        path = tmp_path / "topology.yaml"
        path.write_text(
            "vpcId: vpc-1\n"
            "availabilityZones: [a, b]\n"
            "subnets:\n"
            "  public:\n"
            "    - {id: pub-1, availabilityZone: a}\n"
            "    - {id: pub-2, availabilityZone: b, name: Edge}\n",
            encoding="utf-8",
        )
        topology = anyio.run(load_topology, path)
        assert [s.subnet_id for s in topology.public_subnets] == ["pub-1", "pub-2"]
        assert topology.public_subnets[0].group_name is None
        assert topology.public_subnets[1].group_name == "Edge"
        assert topology.private_subnets == ()

    def test_load_exported(self, tmp_path) -> None:
        """An export file loads into an ExportedTopology."""
        path = tmp_path / "bag.json"
        anyio.run(write_values, path, VALUES)
        exported = anyio.run(load_exported, path)
        assert exported.private_subnet_ids == ("sub-1", "sub-2")
        assert exported.public_subnet_ids is None
