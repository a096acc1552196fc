"""Capture registry graph screenshots using Playwright.

Renders the sample registry, waits for the force layout to settle, then
saves one idle screenshot and one with the pointer over the canvas centre.
Needs network access for the force-graph CDN build unless --force-graph-js
is given.

Run:  python scripts/capture_graph.py [--force-graph-js path/to/force-graph.min.js]
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "examples"))

from render_sample_registry import PALETTE, make_registry  # noqa: E402

from impgraph.viz.widget import visualize  # noqa: E402


async def capture_graph(name, force_graph_js=None, width=1200, height=900):
    from playwright.async_api import async_playwright

    output_dir = Path("outputs")
    output_dir.mkdir(exist_ok=True)

    widget = visualize(make_registry(), PALETTE, width=width, height=height, force_graph_js=force_graph_js)
    html = widget.html_content

    # Save HTML for debugging
    html_path = output_dir / f"graph_{name}.html"
    html_path.write_text(html)

    async with async_playwright() as p:
        browser = await p.chromium.launch()
        page = await browser.new_page(viewport={"width": width, "height": height})
        await page.set_content(html)
        await page.wait_for_timeout(3000)

        idle_path = output_dir / f"graph_{name}.png"
        await page.screenshot(path=str(idle_path))
        print(f"Saved {idle_path}")

        await page.mouse.move(width / 2, height / 2)
        await page.wait_for_timeout(600)
        hover_path = output_dir / f"graph_{name}_hover.png"
        await page.screenshot(path=str(hover_path))
        print(f"Saved {hover_path}")
        await browser.close()


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--force-graph-js", help="Local force-graph bundle to inline")
    args = parser.parse_args()
    asyncio.run(capture_graph("sample", force_graph_js=args.force_graph_js))


if __name__ == "__main__":
    main()
