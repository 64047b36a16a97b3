"""
Page Object Model (POM) classes for the Todo List app.

Page objects keep selectors and navigation out of scenario logic: a
change in the app's markup only requires an update here.
"""

from todo_suite.pages.base_page import BasePage
from todo_suite.pages.todo_list_page import TodoListPage

__all__ = ["BasePage", "TodoListPage"]
