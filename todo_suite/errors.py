"""
Error taxonomy for the suite.

Every failure a scenario can hit is one of these. None of them is
retried by the runner: the only retry in the system is the polling done
inside the assertion layer before AssertionTimeout is raised.
"""

from __future__ import annotations

from typing import Any


class SuiteError(Exception):
    """Base class for all suite errors."""


class ConfigurationError(SuiteError):
    """Settings are missing or out of range."""


class ElementNotFound(SuiteError):
    """A locator that must match exactly one element matched none."""

    def __init__(self, description: str, timeout: float):
        self.description = description
        self.timeout = timeout
        super().__init__(f"No element found for {description} within {timeout:g}s")


class AmbiguousElement(SuiteError):
    """A locator that must match exactly one element matched several."""

    def __init__(self, description: str, count: int):
        self.description = description
        self.count = count
        super().__init__(f"Expected exactly one element for {description}, found {count}")


class AssertionTimeout(SuiteError, AssertionError):
    """
    An expected condition was never observed before the timeout.

    Also an AssertionError so pytest reports it as a failed assertion
    rather than an error.

    Attributes:
        description: What was being checked.
        expected: The expected value.
        observed: The last value read from the page.
        timeout: Seconds waited.
    """

    def __init__(self, description: str, expected: Any, observed: Any, timeout: float):
        self.description = description
        self.expected = expected
        self.observed = observed
        self.timeout = timeout
        super().__init__(
            f"{description}: expected {expected!r}, last observed {observed!r} "
            f"(waited {timeout:g}s)"
        )


class NavigationFailure(SuiteError):
    """The setup hook could not reach the target page."""


class ScenarioTimeout(SuiteError):
    """A scenario ran past its own timeout or the suite deadline."""
