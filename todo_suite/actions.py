"""
Element-interaction primitives.

Each primitive locates exactly one interactive element, fails loudly
when the locator matches none or several, and performs a single action
on it.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from todo_suite.errors import AmbiguousElement, ElementNotFound
from todo_suite.waiting import poll_until

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
DEFAULT_INTERVAL = 0.1


def resolve_single(
    locator: Locator,
    description: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> Locator:
    """
    Wait for a locator to match and insist the match is unique.

    Args:
        locator: Locator to resolve.
        description: Human-readable name used in errors.
        timeout: Seconds to wait for the element to appear.
        interval: Seconds between checks.

    Returns:
        The same locator, now known to match exactly one element.

    Raises:
        ElementNotFound: Nothing matched within the timeout.
        AmbiguousElement: More than one element matched.
    """
    result = poll_until(
        locator.count,
        lambda count: count >= 1,
        timeout=timeout,
        interval=interval,
        transient=(PlaywrightError,),
    )
    if not result.satisfied:
        raise ElementNotFound(description, timeout)
    if result.value > 1:
        raise AmbiguousElement(description, result.value)
    return locator


def click_element(
    locator: Locator,
    description: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Click the single element matched by ``locator``."""
    resolve_single(locator, description, timeout=timeout, interval=interval).click(
        timeout=timeout * 1000
    )
    logger.debug("Clicked %s", description)


def click_by_label(
    page: Page,
    label: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """
    Click the button whose accessible name is exactly ``label``.

    Args:
        page: Playwright page instance.
        label: Visible button label.
        timeout: Seconds to wait for the button.
        interval: Seconds between checks.
    """
    click_element(
        page.get_by_role("button", name=label, exact=True),
        f"button {label!r}",
        timeout=timeout,
        interval=interval,
    )


def fill_by_placeholder(
    page: Page,
    placeholder: str,
    text: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """
    Replace the content of the input whose placeholder is ``placeholder``.

    Args:
        page: Playwright page instance.
        placeholder: Exact placeholder attribute value.
        text: Text to enter; existing content is cleared first.
        timeout: Seconds to wait for the input.
        interval: Seconds between checks.
    """
    field = resolve_single(
        page.get_by_placeholder(placeholder, exact=True),
        f"input with placeholder {placeholder!r}",
        timeout=timeout,
        interval=interval,
    )
    field.fill(text, timeout=timeout * 1000)
    logger.debug("Filled %r with %r", placeholder, text)
