"""Shared registry fixtures."""

import pytest

from impgraph import RegistryData, RegistryGraph

NIXOS = "outputs.nixosConfigurations"
HOME = "outputs.homeConfigurations"


@pytest.fixture
def pair_data():
    """A (group X, val 2) -> B (nixos output, val 0)."""
    return RegistryData.from_dict(
        {
            "nodes": [
                {"id": "A", "name": "A", "val": 2, "group": "X"},
                {"id": "B", "name": "B", "val": 0, "group": NIXOS},
            ],
            "links": [{"source": "A", "target": "B"}],
        }
    )


@pytest.fixture
def pair_graph(pair_data):
    return RegistryGraph(pair_data)


@pytest.fixture
def registry_dict():
    """Small registry with a hub, two outputs, a non-sink output and a dangling link."""
    return {
        "nodes": [
            {"id": "nixpkgs", "name": "nixpkgs", "val": 6, "group": "inputs"},
            {"id": "mod.base", "name": "base\nshell\nlocale", "val": 3, "group": "modules.nixos"},
            {"id": "mod.home", "name": "home", "val": 1, "group": "modules.home"},
            {"id": "host", "name": "laptop\ndesktop", "val": 0, "group": NIXOS},
            {"id": "user", "name": "alice", "val": 0, "group": HOME},
            {"id": "wrapper", "name": "wrapper", "val": 0, "group": NIXOS},
        ],
        "links": [
            {"source": "nixpkgs", "target": "mod.base"},
            {"source": "nixpkgs", "target": "mod.home"},
            {"source": "mod.base", "target": "host"},
            {"source": "mod.home", "target": "user"},
            {"source": "wrapper", "target": "host"},
            {"source": "mod.base", "target": "missing"},
        ],
    }


@pytest.fixture
def registry_graph(registry_dict):
    return RegistryGraph.from_dict(registry_dict)


@pytest.fixture
def palette():
    return {
        "inputs": "#4caf50",
        "modules.nixos": "#2196f3",
        "modules.home": 42,
        NIXOS: "#ff5722",
    }
