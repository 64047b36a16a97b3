"""
Shared pytest fixtures for the Todo List suite's own tests.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Test data factories backed by Faker
- Screenshot capture on failure for every browser test
"""

from __future__ import annotations

import pytest
from faker import Faker
from playwright.sync_api import Error as PlaywrightError

from config import SuiteSettings, load_settings
from todo_suite.errors import ConfigurationError
from todo_suite.pages.base_page import BasePage


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Settings Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def testing_settings() -> SuiteSettings:
    """
    Settings with short timeouts for tests of the suite's own code.

    Returns:
        SuiteSettings built from the testing configuration.
    """
    return load_settings("testing")


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_text_factory():
    """
    Factory for distinct task texts the app accepts.

    Texts are unique within one test, non-empty, at most 30 characters
    and never a substring of another generated text.

    Example:
        def test_something(task_text_factory):
            texts = task_text_factory(3)
    """
    fake.unique.clear()

    def _make(count: int) -> list[str]:
        texts: list[str] = []
        while len(texts) < count:
            candidate = fake.unique.word()
            if len(candidate) > 30:
                continue
            if any(candidate in text or text in candidate for text in texts):
                continue
            texts.append(candidate)
        return texts

    return _make


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

# Settings fixtures in order of preference; the first one a test uses wins
SETTINGS_FIXTURES = ("fixture_settings", "e2e_settings", "testing_settings")


def save_failure_screenshot(item) -> str | None:
    """
    Screenshot the page of a failed browser test.

    The file goes to the screenshot_dir of the settings the test ran
    with, falling back to load_settings() when it used none.

    Returns:
        Path to the saved screenshot, or None for tests without a page.
    """
    page = item.funcargs.get("page")
    if page is None:
        return None
    settings = next(
        (item.funcargs[name] for name in SETTINGS_FIXTURES if name in item.funcargs),
        None,
    ) or load_settings()
    test_name = item.name.replace("/", "_").replace("::", "_")
    return BasePage(page, settings).take_screenshot(test_name)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on browser test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        try:
            screenshot_path = save_failure_screenshot(item)
        except (PlaywrightError, OSError, ConfigurationError) as exc:
            print(f"\nFailed to capture screenshot: {exc}")
        else:
            if screenshot_path:
                print(f"\nScreenshot saved: {screenshot_path}")
