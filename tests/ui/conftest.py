"""
Playwright fixtures for the fixture-page browser tests.

Key Concepts Demonstrated:
- Live server fixture for Playwright
- Browser context management
- Settings pointed at the local server
"""

import threading
from dataclasses import replace
from typing import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page
from werkzeug.serving import make_server

from config import SuiteSettings
from tests.ui.fixture_app import create_fixture_app
from todo_suite.runner import BROWSER_CONTEXT_ARGS


# -----------------------------------------------------------------------------
# Server Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """Create the Flask fixture app."""
    return create_fixture_app()


@pytest.fixture(scope="session")
def live_server(app) -> Generator[str, None, None]:
    """
    Serve the fixture app from a background thread.

    Port 0 lets the OS pick a free port, so parallel sessions never collide.

    Yields:
        str: Base URL of the running server.
    """
    server = make_server("127.0.0.1", 0, app, threaded=True)
    server_thread = threading.Thread(target=server.serve_forever)
    server_thread.daemon = True
    server_thread.start()

    yield f"http://127.0.0.1:{server.server_port}"

    server.shutdown()
    server_thread.join(timeout=5)


@pytest.fixture
def fixture_settings(testing_settings: SuiteSettings, live_server: str, tmp_path) -> SuiteSettings:
    """Testing settings whose entry page is the local fixture entry page."""
    return replace(
        testing_settings,
        base_url=f"{live_server}/entry",
        screenshot_dir=str(tmp_path / "screenshots"),
    )


# -----------------------------------------------------------------------------
# Browser Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser_context_args():
    """
    Configure browser context options.

    Returns:
        dict: Browser context configuration.
    """
    return dict(BROWSER_CONTEXT_ARGS)


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    Args:
        browser: Playwright browser instance.
        browser_context_args: Context configuration.

    Yields:
        BrowserContext: Fresh browser context.
    """
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    """
    Create a new page (tab) for each test.

    Yields:
        Page: Playwright page object.
    """
    page = context.new_page()
    yield page
    page.close()
