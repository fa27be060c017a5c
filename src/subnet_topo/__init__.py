"""
Subnet Topology Package

Models a virtual network's subnets grouped by routing type and availability
zone, resolves workload placement requests against it, and exports/imports
the topology as a flat value bag for independently deployed consumers.
"""

__version__ = "0.1.0"

# Import main components for easy access
from .core.types import SubnetType, PlacementRequest
from .core.errors import (
    TopologyError, AmbiguousPlacement, UnknownSubnetGroup,
    TopologyMismatch, MalformedImport,
)
from .core.models import Subnet, NetworkTopology, ExportedTopology, DependencyList
from .lookup import NetworkLookupProps, NetworkLookupProvider

__all__ = [
    "SubnetType",
    "PlacementRequest",
    "TopologyError",
    "AmbiguousPlacement",
    "UnknownSubnetGroup",
    "TopologyMismatch",
    "MalformedImport",
    "Subnet",
    "NetworkTopology",
    "ExportedTopology",
    "DependencyList",
    "NetworkLookupProps",
    "NetworkLookupProvider",
]
