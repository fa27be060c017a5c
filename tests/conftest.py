"""Shared fixtures for subnet_topo tests."""

import pytest

from subnet_topo import NetworkTopology, Subnet


@pytest.fixture
def zones():
    return ("us-east-1a", "us-east-1b")


@pytest.fixture
def topology(zones):
    """Two-AZ network with public and private subnets and no isolated ones."""
    return NetworkTopology(
        vpc_id="vpc-123",
        availability_zones=zones,
        public_subnets=(
            Subnet(subnet_id="pub-1", availability_zone=zones[0]),
            Subnet(subnet_id="pub-2", availability_zone=zones[1]),
        ),
        private_subnets=(
            Subnet(subnet_id="priv-1", availability_zone=zones[0]),
            Subnet(subnet_id="priv-2", availability_zone=zones[1]),
        ),
    )


@pytest.fixture
def named_topology(zones):
    """Network whose subnets all carry explicit group names."""
    return NetworkTopology(
        vpc_id="vpc-456",
        availability_zones=zones,
        public_subnets=(
            Subnet(subnet_id="pub-1", availability_zone=zones[0], group_name="Ingress"),
            Subnet(subnet_id="pub-2", availability_zone=zones[1], group_name="Ingress"),
        ),
        private_subnets=(
            Subnet(subnet_id="app-1", availability_zone=zones[0], group_name="App"),
            Subnet(subnet_id="app-2", availability_zone=zones[1], group_name="App"),
        ),
        isolated_subnets=(
            Subnet(subnet_id="db-1", availability_zone=zones[0], group_name="Database"),
            Subnet(subnet_id="db-2", availability_zone=zones[1], group_name="Database"),
        ),
    )
