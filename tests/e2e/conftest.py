"""Playwright fixtures for end-to-end tests against the hosted Todo List app."""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from config import SuiteSettings, load_settings
from todo_suite.live_target import is_target_reachable
from todo_suite.pages.todo_list_page import TodoListPage
from todo_suite.runner import BROWSER_CONTEXT_ARGS, ScenarioRunner


@pytest.fixture(scope="session")
def e2e_settings() -> SuiteSettings:
    """
    Settings for the hosted app.

    The environment comes from TODO_SUITE_ENV and an optional YAML file
    from TODO_SUITE_CONFIG; browser and headed mode are pytest-playwright's.
    """
    return load_settings(config_file=os.getenv("TODO_SUITE_CONFIG"))


@pytest.fixture(scope="session")
def target_url(e2e_settings: SuiteSettings) -> str:
    """Entry page URL; skips the e2e suite when the site cannot be reached."""
    if not is_target_reachable(e2e_settings.base_url):
        pytest.skip(f"{e2e_settings.base_url} is not reachable; set TODO_BASE_URL to run e2e tests")
    return e2e_settings.base_url


@pytest.fixture(scope="session")
def browser_context_args():
    return dict(BROWSER_CONTEXT_ARGS)


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def scenario_runner(e2e_settings: SuiteSettings, target_url: str) -> ScenarioRunner:
    return ScenarioRunner(e2e_settings)


@pytest.fixture
def todo_page(page: Page, e2e_settings: SuiteSettings, target_url: str) -> TodoListPage:
    """TodoListPage already opened through the entry link."""
    return TodoListPage(page, e2e_settings).open()
