"""Visual constants for the registry graph.

Everything the browser client needs to draw the graph lives here so the
Python models and the bundled JS agree on the numbers. To restyle the
graph, pass a modified ``RenderStyle`` to ``generate_graph_html``.
"""

from dataclasses import asdict, dataclass

from impgraph.graph.sinks import HOVER_PADDING

DEFAULT_COLOR = "#9e9e9e"


@dataclass(frozen=True)
class RenderStyle:
    """Colors, widths and animation timing for one render."""

    # Canvas
    background: str = "#2d2d2d"
    default_color: str = DEFAULT_COLOR
    label_color: str = "#fff"
    label_font: str = "bold 10px sans-serif"
    hover_padding: int = HOVER_PADDING

    # Highlight ring
    hover_ring_rgb: tuple[int, int, int] = (255, 87, 34)
    neighbor_ring_rgb: tuple[int, int, int] = (255, 171, 0)
    ring_growth: float = 0.4
    ring_threshold: float = 0.01

    # Links
    link_color: str = "rgba(255,255,255,0.4)"
    arrow_color: str = "rgba(255,255,255,0.6)"
    accent_color: str = "rgba(255,87,34,1)"
    link_width: float = 2
    link_width_boost: float = 1.5
    arrow_length: int = 6
    arrow_rel_pos: float = 1

    # Animation
    transition_speed: float = 0.15
    snap_threshold: float = 0.01
    dash_length: float = 4
    gap_length: float = 6
    dash_period_ms: int = 400

    def to_dict(self) -> dict:
        """camelCase mapping embedded into the HTML for the JS client."""
        out = {}
        for key, value in asdict(self).items():
            head, *rest = key.split("_")
            out[head + "".join(part.title() for part in rest)] = (
                list(value) if isinstance(value, tuple) else value
            )
        return out


DEFAULT_STYLE = RenderStyle()
