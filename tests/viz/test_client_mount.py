"""Page wiring tests for the bundled client (via Playwright).

force-graph is replaced by a recording stub: every setter is chainable and
its arguments are kept, so the callbacks ``mount`` installs can be invoked
directly against hand-placed nodes.
"""

import json

import pytest

from impgraph.viz.html_generator import build_payload, generate_graph_html

FORCE_GRAPH_STUB = """
window.ForceGraph = function (el) {
  const calls = {};
  const chain = new Proxy({}, {
    get(_, name) {
      return (...args) => {
        (calls[name] = calls[name] || []).push(args);
        return chain;
      };
    },
  });
  window.__fg = { el, calls };
  return chain;
};
"""


@pytest.fixture
def mounted(client_page, registry_graph, palette):
    """Client mounted on a stub force-graph with frames stepped by hand."""
    payload = json.loads(json.dumps(build_payload(registry_graph, palette)))
    client_page.evaluate(
        """([stub, payload]) => {
            (new Function(stub))();
            window.__frames = [];
            window.requestAnimationFrame = cb => window.__frames.push(cb);
            document.body.innerHTML = '<div id="graph"></div><div id="info"></div>';
            window.__payload = payload;
            window.ImpGraph.mount(document.getElementById('graph'), payload);
            window.nodeById = id => payload.graph.nodes.find(n => n.id === id);
            window.callback = name => window.__fg.calls[name][0][0];
        }""",
        [FORCE_GRAPH_STUB, payload],
    )
    return client_page


def _info(page):
    return page.evaluate("() => document.getElementById('info').innerHTML")


class TestMount:
    def test_graph_data_and_container(self, mounted):
        result = mounted.evaluate(
            "() => [window.__fg.el.id, window.__fg.calls.graphData[0][0].nodes.length]"
        )
        assert result == ["graph", 6]

    def test_drag_end_pins_node(self, mounted):
        pinned = mounted.evaluate(
            """() => {
                const node = nodeById('nixpkgs');
                node.x = 12.5;
                node.y = -40;
                callback('onNodeDragEnd')(node);
                return [node.fx, node.fy];
            }"""
        )
        assert pinned == [12.5, -40]

    def test_info_panel_placeholder_on_mount(self, mounted):
        info = _info(mounted)
        assert "imp Registry" in info
        assert "Hover over nodes to highlight connections" in info

    def test_hover_fills_info_panel_and_hover_out_restores(self, mounted):
        mounted.evaluate("() => callback('onNodeHover')(nodeById('host'))")
        info = _info(mounted)
        assert "laptop, desktop" in info
        assert "outputs / nixosConfigurations" in info
        assert "Hover over nodes" not in info

        mounted.evaluate("() => callback('onNodeHover')(null)")
        info = _info(mounted)
        assert "imp Registry" in info
        assert "Hover over nodes to highlight connections" in info

    def test_info_panel_escapes_names(self, mounted):
        mounted.evaluate(
            "() => callback('onNodeHover')({name: '<b>x</b>', group: 'a.b', neighbors: [], links: []})"
        )
        assert "&lt;b&gt;x&lt;/b&gt;" in _info(mounted)

    def test_line_dash_recomputed_every_frame(self, mounted):
        counts = mounted.evaluate(
            """() => {
                const before = window.__fg.calls.linkLineDash.length;
                for (let i = 0; i < 3; i++) window.__frames.shift()();
                const calls = window.__fg.calls.linkLineDash;
                return [before, calls.length, calls[calls.length - 1][0].length];
            }"""
        )
        # Static pattern at configuration plus the first frame
        assert counts == [2, 5, 4]

    def test_pointer_area_adds_hover_padding(self, mounted, registry_graph):
        radii = mounted.evaluate(
            """() => ['host', 'nixpkgs'].map(id => {
                const node = Object.assign(nodeById(id), {x: 0, y: 0});
                const ctx = {beginPath() {}, fill() {}, arc(x, y, r) { this.r = r; }};
                callback('nodePointerAreaPaint')(node, '#010203', ctx);
                return ctx.r;
            })"""
        )
        assert radii == pytest.approx(
            [registry_graph.view("host").radius + 8, registry_graph.view("nixpkgs").radius + 8]
        )

    def test_node_drawn_in_group_color_with_sink_label(self, mounted):
        drawn = mounted.evaluate(
            """() => ['nixpkgs', 'host'].map(id => {
                const node = Object.assign(nodeById(id), {x: 0, y: 0});
                const ctx = {beginPath() {}, arc() {}, fill() { this.filled = this.fillStyle; },
                             fillText(text) { this.text = text; }};
                callback('nodeCanvasObject')(node, ctx);
                return [ctx.filled, ctx.text || null];
            })"""
        )
        assert drawn == [["#4caf50", None], ["#ff5722", "laptop"]]

    def test_hovered_link_uses_accent(self, mounted):
        colors = mounted.evaluate(
            """() => {
                const link = window.__payload.graph.links.find(l => l.index === 0);
                const before = callback('linkColor')(link);
                callback('onLinkHover')(link);
                for (let i = 0; i < 200; i++) window.__frames.shift()();
                return [before, callback('linkColor')(link), callback('linkWidth')(link)];
            }"""
        )
        assert colors == ["rgba(255,255,255,0.40)", "rgba(255,87,34,1.00)", 3.5]


def test_page_boots_on_dom_content_loaded(page, registry_graph, palette, tmp_path):
    stub = tmp_path / "force-graph.js"
    stub.write_text(FORCE_GRAPH_STUB)
    page.set_content(generate_graph_html(registry_graph, palette, force_graph_js=stub))
    page.wait_for_function("() => window.__fg !== undefined")
    assert page.evaluate("() => window.__fg.el.id") == "graph"
    assert page.evaluate("() => window.__fg.calls.onNodeHover.length") == 1
