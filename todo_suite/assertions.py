"""
Polling assertions against live page state.

Every assertion re-reads the page through take_snapshot() until the
condition holds or the timeout elapses, then raises AssertionTimeout
with the expected value and the last value it saw.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from todo_suite.actions import DEFAULT_INTERVAL, DEFAULT_TIMEOUT
from todo_suite.errors import AssertionTimeout
from todo_suite.snapshot import LocatorSnapshot, take_snapshot
from todo_suite.waiting import poll_until


def _expect(
    locator: Locator,
    description: str,
    expected: Any,
    observe: Callable[[LocatorSnapshot], Any],
    predicate: Callable[[Any], bool],
    timeout: float,
    interval: float,
) -> None:
    result = poll_until(
        lambda: observe(take_snapshot(locator)),
        predicate,
        timeout=timeout,
        interval=interval,
        transient=(PlaywrightError,),
    )
    if not result.satisfied:
        raise AssertionTimeout(description, expected, result.observed, timeout)


def _single_text(snapshot: LocatorSnapshot) -> str | list[str]:
    element = snapshot.single()
    # Show every text when the cardinality is wrong.
    return element.text if element is not None else snapshot.texts


def _single_classes(snapshot: LocatorSnapshot) -> tuple[str, ...] | None:
    element = snapshot.single()
    return element.classes if element is not None else None


def assert_visible(
    locator: Locator,
    description: str = "element",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Assert at least one element matches and all matches are visible."""
    _expect(
        locator,
        f"{description} visibility",
        True,
        lambda snap: snap.visible,
        bool,
        timeout,
        interval,
    )


def assert_hidden(
    locator: Locator,
    description: str = "element",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Assert nothing matches or none of the matches is visible."""
    _expect(
        locator,
        f"{description} visibility",
        False,
        lambda snap: snap.any_visible,
        lambda visible: not visible,
        timeout,
        interval,
    )


def assert_enabled(
    locator: Locator,
    description: str = "element",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Assert at least one element matches and all matches are enabled."""
    _expect(
        locator,
        f"{description} enabled state",
        True,
        lambda snap: snap.enabled,
        bool,
        timeout,
        interval,
    )


def assert_text(
    locator: Locator,
    expected: str,
    description: str = "element",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """
    Assert exactly one element matches and its text equals ``expected``.

    Comparison is exact apart from whitespace surrounding the text.
    """
    _expect(
        locator,
        f"{description} text",
        expected,
        _single_text,
        lambda text: text == expected,
        timeout,
        interval,
    )


def assert_texts(
    locator: Locator,
    expected: Sequence[str],
    description: str = "elements",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Assert the matched elements' texts equal ``expected`` in order."""
    wanted = list(expected)
    _expect(
        locator,
        f"{description} texts",
        wanted,
        lambda snap: snap.texts,
        lambda texts: texts == wanted,
        timeout,
        interval,
    )


def assert_count(
    locator: Locator,
    expected: int,
    description: str = "elements",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Assert the locator matches exactly ``expected`` elements."""
    _expect(
        locator,
        f"{description} count",
        expected,
        lambda snap: snap.count,
        lambda count: count == expected,
        timeout,
        interval,
    )


def assert_has_class(
    locator: Locator,
    class_name: str,
    description: str = "element",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Assert exactly one element matches and it carries ``class_name``."""
    _expect(
        locator,
        f"{description} classes",
        f"contains {class_name}",
        _single_classes,
        lambda classes: classes is not None and class_name in classes,
        timeout,
        interval,
    )


def assert_lacks_class(
    locator: Locator,
    class_name: str,
    description: str = "element",
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Assert exactly one element matches and it does not carry ``class_name``."""
    _expect(
        locator,
        f"{description} classes",
        f"does not contain {class_name}",
        _single_classes,
        lambda classes: classes is not None and class_name not in classes,
        timeout,
        interval,
    )
