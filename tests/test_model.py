"""Tests for dataset and palette loading."""

import json

import pytest

from impgraph import PaletteError, RegistryData, RegistryDataError, RegistryGraph, load_palette


class TestRegistryDataFromDict:
    def test_reads_nodes_and_links(self, registry_dict):
        data = RegistryData.from_dict(registry_dict)
        assert [n.id for n in data.nodes][:2] == ["nixpkgs", "mod.base"]
        assert data.links[0].source == "nixpkgs"
        assert data.links[0].target == "mod.base"

    def test_defaults_for_missing_fields(self):
        """name falls back to id, val to 0, group to empty."""
        data = RegistryData.from_dict({"nodes": [{"id": "solo"}]})
        node = data.nodes[0]
        assert node.name == "solo"
        assert node.val == 0
        assert node.group == ""
        assert data.links == ()

    def test_keeps_link_order(self, registry_dict):
        data = RegistryData.from_dict(registry_dict)
        assert [l.target for l in data.links] == [l["target"] for l in registry_dict["links"]]

    def test_dangling_links_are_not_an_error(self):
        data = RegistryData.from_dict(
            {"nodes": [{"id": "a"}], "links": [{"source": "a", "target": "ghost"}]}
        )
        assert len(data.links) == 1

    def test_missing_endpoint_is_dangling(self):
        """An absent source is None, never the string 'None'."""
        data = RegistryData.from_dict(
            {"nodes": [{"id": "None"}, {"id": "b"}], "links": [{"target": "b"}]}
        )
        assert data.links[0].source is None
        graph = RegistryGraph(data)
        assert graph.skipped_links == [0]
        assert graph.neighbors("None") == []

    def test_multiline_first_line(self):
        data = RegistryData.from_dict({"nodes": [{"id": "h", "name": "laptop\ndesktop"}]})
        assert data.nodes[0].first_line == "laptop"

    def test_round_trip_shape(self, registry_dict):
        data = RegistryData.from_dict(registry_dict)
        assert data.to_dict()["links"] == registry_dict["links"]


class TestRegistryDataErrors:
    def test_not_an_object(self):
        with pytest.raises(RegistryDataError, match="object"):
            RegistryData.from_dict([1, 2, 3])

    def test_missing_nodes(self):
        with pytest.raises(RegistryDataError, match="'nodes'"):
            RegistryData.from_dict({"links": []})

    def test_links_not_array(self):
        with pytest.raises(RegistryDataError, match="'links'"):
            RegistryData.from_dict({"nodes": [], "links": {}})

    def test_node_without_id(self):
        with pytest.raises(RegistryDataError, match="#1"):
            RegistryData.from_dict({"nodes": [{"id": "a"}, {"name": "b"}]})

    def test_duplicate_ids(self):
        with pytest.raises(RegistryDataError, match="duplicate node id 'a'"):
            RegistryData.from_dict({"nodes": [{"id": "a"}, {"id": "a"}]})

    def test_link_not_an_object(self):
        """Skipping it would shift every later link's index."""
        with pytest.raises(RegistryDataError, match="link #1 is not an object"):
            RegistryData.from_dict(
                {"nodes": [{"id": "a"}], "links": [{"source": "a", "target": "a"}, "a->a"]}
            )

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_bytes(b'{"nodes": ["\xff"]}')
        with pytest.raises(RegistryDataError, match="not valid UTF-8"):
            RegistryData.load(path)

    def test_error_mentions_source(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text("{not json")
        with pytest.raises(RegistryDataError) as exc_info:
            RegistryData.load(path)
        assert str(path) in str(exc_info.value)
        assert exc_info.value.source == str(path)


class TestLoadPalette:
    def test_loads_mapping(self, tmp_path):
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"inputs": "#fff"}))
        assert load_palette(path) == {"inputs": "#fff"}

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "palette.json"
        path.write_text(json.dumps(["#fff"]))
        with pytest.raises(PaletteError):
            load_palette(path)

    def test_rejects_invalid_json(self, tmp_path):
        path = tmp_path / "palette.json"
        path.write_text("{")
        with pytest.raises(PaletteError, match="not valid JSON"):
            load_palette(path)

    def test_rejects_non_utf8(self, tmp_path):
        path = tmp_path / "palette.json"
        path.write_bytes(b'{"inputs": "\xff"}')
        with pytest.raises(PaletteError, match="not valid UTF-8"):
            load_palette(path)

    def test_malformed_entries_are_kept(self, tmp_path):
        """Bad colors are resolved at render time, not rejected on load."""
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"a": 42, "b": ""}))
        assert load_palette(path) == {"a": 42, "b": ""}
