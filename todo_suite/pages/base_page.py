"""
Base Page class for the Page Object Model.

This class provides common functionality shared by all page objects:
navigation, the two action primitives bound to the configured timeouts,
and screenshot capture.
"""

from __future__ import annotations

import logging
import os

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from config import SuiteSettings
from todo_suite import actions
from todo_suite.errors import NavigationFailure

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance.
        settings: Resolved suite settings.
        base_url: Entry URL of the application.
    """

    def __init__(self, page: Page, settings: SuiteSettings):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            settings: Resolved suite settings.
        """
        self.page = page
        self.settings = settings
        self.base_url = settings.base_url

    @property
    def timeouts(self) -> dict[str, float]:
        """Keyword arguments for the action and assertion helpers."""
        return {
            "timeout": self.settings.assertion_timeout,
            "interval": self.settings.poll_interval,
        }

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, url: str | None = None) -> None:
        """
        Load a URL, failing on transport errors and HTTP error statuses.

        Args:
            url: Absolute URL; defaults to the configured base URL.

        Raises:
            NavigationFailure: The page could not be loaded.
        """
        target = url or self.base_url
        logger.info("Navigating to %s", target)
        try:
            response = self.page.goto(target)
        except PlaywrightError as exc:
            raise NavigationFailure(f"Could not load {target}: {exc}") from exc
        if response is not None and response.status >= 400:
            raise NavigationFailure(f"{target} answered HTTP {response.status}")

    def click_link(self, name: str) -> None:
        """Follow the single link whose accessible name is exactly ``name``."""
        actions.click_element(
            self.page.get_by_role("link", name=name, exact=True),
            f"link {name!r}",
            **self.timeouts,
        )

    def wait_for_page_load(self) -> None:
        """Wait for page to finish loading."""
        self.page.wait_for_load_state("domcontentloaded")

    # -------------------------------------------------------------------------
    # Action Primitives
    # -------------------------------------------------------------------------

    def click_by_label(self, label: str) -> None:
        actions.click_by_label(self.page, label, **self.timeouts)

    def fill_by_placeholder(self, placeholder: str, text: str) -> None:
        actions.fill_by_placeholder(self.page, placeholder, text, **self.timeouts)

    def click(self, locator: Locator, description: str) -> None:
        actions.click_element(locator, description, **self.timeouts)

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str) -> str:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file.

        Returns:
            Path to the saved screenshot.
        """
        os.makedirs(self.settings.screenshot_dir, exist_ok=True)
        safe_name = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in name)
        path = os.path.join(self.settings.screenshot_dir, f"{safe_name}.png")
        self.page.screenshot(path=path)
        return path
