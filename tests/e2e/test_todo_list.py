"""
End-to-end browser flows for the hosted Todo List app.

The five numbered scenarios are the same objects the ``todo-suite``
command runs; here pytest runs each one through ScenarioRunner so the
setup hook, step ordering and failure reporting are identical.

The property tests below check behaviours that must hold for any task
texts, generated with Faker.

Key SDET Concepts Demonstrated:
- End-to-end testing with Playwright (browser automation)
- Page Object Model (POM) for maintainable UI tests
- Polling assertions instead of fixed sleeps
- AAA pattern (Arrange / Act / Assert) in every test
"""

from __future__ import annotations

import pytest

from todo_suite.pages.todo_list_page import MAX_TASK_LENGTH, TodoListPage
from todo_suite.scenarios import SCENARIOS, VALID_TASK

pytestmark = pytest.mark.e2e


@pytest.mark.parametrize("scenario", SCENARIOS, ids=[s.name.split(" - ")[0] for s in SCENARIOS])
def test_scenario(scenario, scenario_runner, page):
    """Run one numbered scenario and fail with its step-level report."""
    # Act
    result = scenario_runner.run_scenario(scenario, page)

    # Assert
    assert result.passed, result.failure_summary()


class TestSetupHook:
    """Tests for the state the setup hook leaves the app in."""

    def test_fresh_app_is_empty(self, todo_page: TodoListPage):
        """Test that a freshly opened app shows the heading and no tasks."""
        # Arrange -- todo_page fixture already opened the app

        # Act -- nothing; observe the initial state

        # Assert
        todo_page.assert_heading("My Tasks")
        todo_page.assert_empty()


class TestTaskListProperties:
    """Tests for behaviours that must hold for any valid task texts."""

    def test_tasks_listed_in_insertion_order(self, todo_page: TodoListPage, task_text_factory):
        """Test that N distinct valid tasks produce exactly N rows, in order."""
        # Arrange
        texts = task_text_factory(4)

        # Act
        todo_page.add_tasks(texts)

        # Assert
        todo_page.assert_task_count(len(texts))
        todo_page.assert_tasks(texts)

    def test_even_toggles_restore_not_completed(self, todo_page: TodoListPage, task_text_factory):
        """Test that clicking a task twice leaves it not completed."""
        # Arrange
        todo_page.add_tasks(task_text_factory(1))
        todo_page.assert_not_completed(0)

        # Act
        todo_page.toggle_task(0)
        todo_page.assert_completed(0)
        todo_page.toggle_task(0)

        # Assert
        todo_page.assert_not_completed(0)

    def test_remove_completed_keeps_incomplete_tasks(self, todo_page: TodoListPage, task_text_factory):
        """Test that only completed tasks are removed and the empty state stays hidden."""
        # Arrange
        texts = task_text_factory(3)
        todo_page.add_tasks(texts)
        todo_page.toggle_task(0)
        todo_page.toggle_task(2)
        todo_page.assert_completed(0)
        todo_page.assert_completed(2)

        # Act
        todo_page.remove_completed()

        # Assert
        todo_page.assert_tasks([texts[1]])
        todo_page.assert_not_completed(0)
        todo_page.assert_empty_state_hidden()

    def test_remove_completed_with_everything_completed_shows_empty_state(
        self, todo_page: TodoListPage, task_text_factory
    ):
        """Test that removing every task brings back the empty-state message."""
        # Arrange
        todo_page.add_tasks(task_text_factory(2))
        todo_page.toggle_all_tasks()

        # Act
        todo_page.remove_completed()

        # Assert
        todo_page.assert_empty()

    def test_remove_single_row(self, todo_page: TodoListPage, task_text_factory):
        """Test that a row's remove control removes only that task."""
        # Arrange
        texts = task_text_factory(3)
        todo_page.add_tasks(texts)

        # Act
        todo_page.remove_task(1)

        # Assert
        todo_page.assert_tasks([texts[0], texts[2]])

    def test_search_filters_to_unique_match(self, todo_page: TodoListPage, task_text_factory):
        """Test that searching a text unique to one task shows only that row."""
        # Arrange
        texts = task_text_factory(4)
        todo_page.add_tasks(texts)

        # Act
        todo_page.search(texts[2])

        # Assert
        todo_page.assert_tasks([texts[2]])
        todo_page.assert_task_count(1)


class TestTaskValidation:
    """Tests for inputs the app must reject."""

    def test_duplicate_task_rejected(self, todo_page: TodoListPage):
        """Test that re-adding an existing task shows the duplicate error."""
        # Arrange
        todo_page.add_task(VALID_TASK)

        # Act
        todo_page.submit_task(VALID_TASK)

        # Assert
        todo_page.assert_error("Error: You already have Do groceries in your todo list.")
        todo_page.assert_task_count(1)

    def test_task_over_limit_rejected(self, todo_page: TodoListPage):
        """Test that a task longer than the limit is rejected and not added."""
        # Arrange
        too_long = "x" * (MAX_TASK_LENGTH + 1)

        # Act
        todo_page.submit_task(too_long)

        # Assert
        todo_page.assert_error("Error: Todo cannot be more than 30 characters!")
        todo_page.assert_empty()

    def test_task_at_limit_accepted(self, todo_page: TodoListPage):
        """Test that a task of exactly the maximum length is added."""
        # Arrange
        at_limit = "y" * MAX_TASK_LENGTH

        # Act
        todo_page.add_task(at_limit)

        # Assert
        todo_page.assert_tasks([at_limit])

    def test_empty_submission_is_ignored(self, todo_page: TodoListPage):
        """Test that pressing ADD with no text adds nothing."""
        # Act
        todo_page.click_by_label("ADD")

        # Assert
        todo_page.assert_empty()
