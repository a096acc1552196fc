"""Shared fixtures for visualization tests.

Provides Playwright detection and a headless page fixture for running the
bundled client script.
"""

from importlib.resources import files

import pytest

try:
    import playwright  # noqa: F401
    HAS_PLAYWRIGHT = True
except ImportError:
    HAS_PLAYWRIGHT = False


@pytest.fixture(scope="session")
def _playwright_instance():
    """Shared Playwright instance for the test session."""
    if not HAS_PLAYWRIGHT:
        pytest.skip("playwright not installed")

    from playwright.sync_api import sync_playwright
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def _browser(_playwright_instance):
    """Shared browser instance for the test session."""
    try:
        browser = _playwright_instance.chromium.launch(headless=True)
    except Exception as e:
        pytest.skip(f"chromium not available: {e}")
    yield browser
    browser.close()


@pytest.fixture
def page(_browser):
    """Create a Playwright page for testing."""
    page = _browser.new_page()
    yield page
    page.close()


@pytest.fixture
def client_page(page):
    """Page with the bundled client script loaded (no force-graph)."""
    js = (files("impgraph.viz.assets") / "registry_graph.js").read_text(encoding="utf-8")
    page.set_content(f"<html><head><script>{js}</script></head><body></body></html>")
    page.wait_for_function("window.ImpGraph && window.ImpGraph.lerpColor")
    return page
