"""
Browser-driven end-to-end suite for the TechGlobal Todo List app.

The package is split into action primitives, polling assertions, page
objects and a scenario runner. Scenario definitions live in
:mod:`todo_suite.scenarios`; the ``todo-suite`` command runs them.
"""

import logging

from todo_suite.errors import (
    AmbiguousElement,
    AssertionTimeout,
    ConfigurationError,
    ElementNotFound,
    NavigationFailure,
    ScenarioTimeout,
    SuiteError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousElement",
    "AssertionTimeout",
    "ConfigurationError",
    "ElementNotFound",
    "NavigationFailure",
    "ScenarioTimeout",
    "SuiteError",
]
