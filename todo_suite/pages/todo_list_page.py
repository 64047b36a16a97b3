"""
Todo List Page Object.

This page object encapsulates all interactions with the Todo List
practice app: the entry navigation, adding, completing, removing and
searching tasks, plus the assertions the scenarios make about them.

Locators are properties, so every access builds a new locator that is
resolved against the page as it is at that moment.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from todo_suite import assertions
from todo_suite.errors import (
    AmbiguousElement,
    AssertionTimeout,
    ElementNotFound,
    NavigationFailure,
)
from todo_suite.pages.base_page import BasePage

logger = logging.getLogger(__name__)

HEADING_TEXT = "My Tasks"
EMPTY_STATE_TEXT = "No tasks found!"
COMPLETED_CLASS = "has-text-success"
MAX_TASK_LENGTH = 30
TOO_LONG_ERROR = "Error: Todo cannot be more than 30 characters!"
DUPLICATE_ERROR = "Error: You already have {task} in your todo list."

NEW_TODO_PLACEHOLDER = "New todo"
SEARCH_PLACEHOLDER = "Type to search"
ADD_LABEL = "ADD"
REMOVE_COMPLETED_LABEL = "Remove completed tasks!"


class TodoListPage(BasePage):
    """
    Page object for the Todo List app.

    Provides methods for:
    - Reaching the app from the entry page (the scenario setup hook)
    - Adding, toggling and removing tasks
    - Searching
    - Asserting on headings, rows, indicators and messages
    """

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def open(self) -> "TodoListPage":
        """
        Navigate to the entry URL and follow the entry link to the app.

        Returns:
            Self for method chaining.

        Raises:
            NavigationFailure: The app could not be reached.
        """
        self.navigate_to(self.base_url)
        try:
            self.click_link(self.settings.entry_link)
            self.wait_for_page_load()
            assertions.assert_visible(self.heading, "todo app heading", **self.timeouts)
        except (ElementNotFound, AmbiguousElement, AssertionTimeout, PlaywrightError) as exc:
            raise NavigationFailure(
                f"Could not reach the todo app via {self.settings.entry_link!r}: {exc}"
            ) from exc
        logger.info("Todo app ready at %s", self.page.url)
        return self

    # -------------------------------------------------------------------------
    # Page Locators
    # -------------------------------------------------------------------------

    @property
    def container(self) -> Locator:
        """Locator for the todo-app modal."""
        return self.page.locator("section")

    @property
    def heading(self) -> Locator:
        """Locator for the modal title."""
        return self.page.locator(".panel-heading")

    @property
    def new_todo_input(self) -> Locator:
        return self.page.locator("#input-add")

    @property
    def add_button(self) -> Locator:
        return self.page.locator("#add-btn")

    @property
    def search_field(self) -> Locator:
        return self.page.locator("#search")

    @property
    def tasks(self) -> Locator:
        """Locator for every task row currently rendered."""
        return self.page.locator("#panel .panel-block div")

    @property
    def remove_buttons(self) -> Locator:
        return self.page.locator(".destroy")

    @property
    def status_indicators(self) -> Locator:
        return self.page.locator("#panel .panel-block span")

    @property
    def empty_state(self) -> Locator:
        """Locator for the "No tasks found!" message."""
        return self.page.locator(".has-text-danger")

    @property
    def error_message(self) -> Locator:
        """Locator for the validation error banner."""
        return self.page.locator(".is-danger")

    # -------------------------------------------------------------------------
    # Row Locators (by position)
    # -------------------------------------------------------------------------

    def task(self, index: int) -> Locator:
        return self.tasks.nth(index)

    def remove_button(self, index: int) -> Locator:
        return self.remove_buttons.nth(index)

    def status_indicator(self, index: int) -> Locator:
        return self.status_indicators.nth(index)

    # -------------------------------------------------------------------------
    # Page Actions
    # -------------------------------------------------------------------------

    def submit_task(self, text: str) -> "TodoListPage":
        """
        Type ``text`` into the new todo input and press ADD.

        No outcome is checked: this is also used for inputs the app must reject.
        """
        self.fill_by_placeholder(NEW_TODO_PLACEHOLDER, text)
        self.click_by_label(ADD_LABEL)
        return self

    def add_task(self, text: str) -> "TodoListPage":
        """Submit a task and wait until one more row is rendered."""
        expected = self.tasks.count() + 1
        self.submit_task(text)
        self.assert_task_count(expected)
        return self

    def add_tasks(self, texts: Iterable[str]) -> "TodoListPage":
        for text in texts:
            self.add_task(text)
        return self

    def toggle_task(self, index: int) -> "TodoListPage":
        """Click a task row to flip its completed state."""
        self.click(self.task(index), f"task row {index}")
        return self

    def toggle_all_tasks(self) -> "TodoListPage":
        for index in range(self.tasks.count()):
            self.toggle_task(index)
        return self

    def remove_task(self, index: int) -> "TodoListPage":
        self.click(self.remove_button(index), f"remove button of task row {index}")
        return self

    def remove_completed(self) -> "TodoListPage":
        self.click_by_label(REMOVE_COMPLETED_LABEL)
        return self

    def search(self, query: str) -> "TodoListPage":
        self.fill_by_placeholder(SEARCH_PLACEHOLDER, query)
        return self

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def get_task_texts(self) -> list[str]:
        """Texts of the task rows currently rendered, whitespace stripped."""
        return [text.strip() for text in self.tasks.all_text_contents()]

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def assert_modal_visible(self) -> None:
        assertions.assert_visible(self.container, "todo-app modal", **self.timeouts)

    def assert_heading(self, expected: str = HEADING_TEXT) -> None:
        assertions.assert_text(self.heading, expected, "modal title", **self.timeouts)

    def assert_new_todo_input_enabled(self) -> None:
        assertions.assert_enabled(self.new_todo_input, "new todo input", **self.timeouts)

    def assert_add_button_enabled(self) -> None:
        assertions.assert_enabled(self.add_button, "ADD button", **self.timeouts)

    def assert_search_field_enabled(self) -> None:
        assertions.assert_enabled(self.search_field, "search field", **self.timeouts)

    def assert_task_count(self, expected: int) -> None:
        assertions.assert_count(self.tasks, expected, "task rows", **self.timeouts)

    def assert_tasks(self, expected: Sequence[str]) -> None:
        """Assert the rendered rows are exactly ``expected``, in order."""
        assertions.assert_texts(self.tasks, expected, "task rows", **self.timeouts)

    def assert_empty(self) -> None:
        """Assert no rows are rendered and the empty-state message is shown."""
        self.assert_task_count(0)
        assertions.assert_text(
            self.empty_state, EMPTY_STATE_TEXT, "empty-state message", **self.timeouts
        )

    def assert_empty_state_hidden(self) -> None:
        assertions.assert_hidden(self.empty_state, "empty-state message", **self.timeouts)

    def assert_completed(self, index: int) -> None:
        assertions.assert_has_class(
            self.status_indicator(index),
            COMPLETED_CLASS,
            f"status indicator of task row {index}",
            **self.timeouts,
        )

    def assert_not_completed(self, index: int) -> None:
        assertions.assert_lacks_class(
            self.status_indicator(index),
            COMPLETED_CLASS,
            f"status indicator of task row {index}",
            **self.timeouts,
        )

    def assert_error(self, expected: str) -> None:
        assertions.assert_text(self.error_message, expected, "validation error", **self.timeouts)

    def assert_too_long_error(self) -> None:
        self.assert_error(TOO_LONG_ERROR)

    def assert_duplicate_error(self, task: str) -> None:
        self.assert_error(DUPLICATE_ERROR.format(task=task))
