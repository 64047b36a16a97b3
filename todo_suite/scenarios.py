"""
Scenario definitions for the Todo List app.

Each scenario starts from the app freshly opened by the runner's setup
hook (navigate to the entry page, follow the "Todo List" link), so the
list is empty when its first step runs.
"""

from __future__ import annotations

from todo_suite.pages.todo_list_page import TodoListPage
from todo_suite.runner import Scenario

TODO_TASKS = ["clean", "workout", "cook", "study", "call mom"]
INVALID_TASK = "Stop procrastinating and get to work!"
VALID_TASK = "Do groceries"


# =============================================================================
# Test Case 01
# =============================================================================

modal_verification = Scenario("Test Case 01 - Todo-App Modal Verification")


@modal_verification.step("Confirm that the todo-app modal is visible with the title “My Tasks”")
def _modal_is_visible(todo: TodoListPage) -> None:
    todo.assert_modal_visible()
    todo.assert_heading("My Tasks")


@modal_verification.step("Validate that the New todo input field is enabled for text entry")
def _new_todo_input_enabled(todo: TodoListPage) -> None:
    todo.assert_new_todo_input_enabled()


@modal_verification.step("Validate ADD button is enabled")
def _add_button_enabled(todo: TodoListPage) -> None:
    todo.assert_add_button_enabled()


@modal_verification.step("Validate Search field is enabled")
def _search_field_enabled(todo: TodoListPage) -> None:
    todo.assert_search_field_enabled()


@modal_verification.step("Validate that the task list is empty, displaying the message “No tasks found!”")
def _list_starts_empty(todo: TodoListPage) -> None:
    todo.assert_empty()


# =============================================================================
# Test Case 02
# =============================================================================

single_task = Scenario("Test Case 02 - Single Task Addition and Removal")


@single_task.step("Enter a new task in the todo input field and add it to the list")
def _add_single_task(todo: TodoListPage) -> None:
    todo.submit_task("Playwright project")


@single_task.step("Validate that the new task appears in the task list")
def _single_task_listed(todo: TodoListPage) -> None:
    todo.assert_tasks(["Playwright project"])


@single_task.step("Validate that the number of tasks in the list is exactly one")
def _single_task_count(todo: TodoListPage) -> None:
    todo.assert_task_count(1)


@single_task.step("Mark the task as completed by clicking on it")
def _complete_single_task(todo: TodoListPage) -> None:
    todo.toggle_task(0)


@single_task.step("Validate item is marked as completed")
def _single_task_completed(todo: TodoListPage) -> None:
    todo.assert_completed(0)


@single_task.step("Click on the button to remove the item you have added")
def _remove_single_task(todo: TodoListPage) -> None:
    # No wait for the removal here; the next step's count check polls for it.
    todo.remove_task(0)


@single_task.step("Validate that the task list is empty, displaying the message “No tasks found!”")
def _single_task_removed(todo: TodoListPage) -> None:
    todo.assert_empty()


# =============================================================================
# Test Case 03
# =============================================================================

multiple_tasks = Scenario("Test Case 03 - Multiple Task Operations")


@multiple_tasks.step("Enter and add 5 to-do items individually")
def _add_five_tasks(todo: TodoListPage) -> None:
    for task in TODO_TASKS:
        todo.submit_task(task)


@multiple_tasks.step("Validate that all added items match the items displayed on the list")
def _five_tasks_listed(todo: TodoListPage) -> None:
    todo.assert_tasks(TODO_TASKS)


@multiple_tasks.step("Mark all the tasks as completed by clicking on them")
def _complete_all_tasks(todo: TodoListPage) -> None:
    todo.toggle_all_tasks()


@multiple_tasks.step("Click on the “Remove completed tasks!” button to clear them")
def _remove_completed_tasks(todo: TodoListPage) -> None:
    todo.remove_completed()


@multiple_tasks.step("Validate that the task list is empty, displaying the message “No tasks found!”")
def _completed_tasks_removed(todo: TodoListPage) -> None:
    todo.assert_empty()


# =============================================================================
# Test Case 04
# =============================================================================

search_and_filter = Scenario("Test Case 04 - Search and Filter Functionality in todo App")


@search_and_filter.step("Enter and add 5 to-do items individually")
def _add_searchable_tasks(todo: TodoListPage) -> None:
    for task in TODO_TASKS:
        todo.submit_task(task)


@search_and_filter.step("Validate that all added items match the items displayed on the list")
def _searchable_tasks_listed(todo: TodoListPage) -> None:
    todo.assert_tasks(TODO_TASKS)


@search_and_filter.step("Enter the complete name of the previously added to-do item into the search bar")
def _search_first_task(todo: TodoListPage) -> None:
    todo.search(TODO_TASKS[0])


@search_and_filter.step("Validate that the list is now filtered to show only the item you searched for")
def _only_match_listed(todo: TodoListPage) -> None:
    todo.assert_tasks([TODO_TASKS[0]])


@search_and_filter.step("Validate that the number of tasks visible in the list is exactly one")
def _one_match_count(todo: TodoListPage) -> None:
    todo.assert_task_count(1)


# =============================================================================
# Test Case 05
# =============================================================================

validation = Scenario("Test Case 05 - Task Validation and Error Handling")


@validation.step("Attempt to add an empty task to the to-do list")
def _submit_empty_task(todo: TodoListPage) -> None:
    todo.click_by_label("ADD")


@validation.step("Validate that the task list is empty, displaying the message “No task found!”")
def _empty_task_ignored(todo: TodoListPage) -> None:
    todo.assert_empty()


@validation.step("Enter an item name exceeding 30 characters into the list")
def _submit_long_task(todo: TodoListPage) -> None:
    todo.submit_task(INVALID_TASK)


@validation.step("Validate error message appears and says “Error: Todo cannot be more than 30 characters!”")
def _long_task_rejected(todo: TodoListPage) -> None:
    todo.assert_too_long_error()


@validation.step("Add a valid item name to the list")
def _submit_valid_task(todo: TodoListPage) -> None:
    todo.submit_task(VALID_TASK)


@validation.step("Validate that the active task count is exactly one")
def _valid_task_count(todo: TodoListPage) -> None:
    todo.assert_task_count(1)


@validation.step("Try to enter an item with the same name already present on the list")
def _submit_duplicate_task(todo: TodoListPage) -> None:
    todo.submit_task(VALID_TASK)


@validation.step("Validate that an error message is displayed, indicating “Error: You already have {ITEM} in your todo list.”")
def _duplicate_task_rejected(todo: TodoListPage) -> None:
    todo.assert_duplicate_error(VALID_TASK)


SCENARIOS = [
    modal_verification,
    single_task,
    multiple_tasks,
    search_and_filter,
    validation,
]


def select(keyword: str | None = None) -> list[Scenario]:
    """Scenarios whose name contains ``keyword`` (case-insensitive); all when None."""
    if not keyword:
        return list(SCENARIOS)
    needle = keyword.lower()
    return [scenario for scenario in SCENARIOS if needle in scenario.name.lower()]
