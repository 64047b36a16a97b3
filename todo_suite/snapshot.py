"""
Observed-state snapshots of a locator.

The page re-renders under the suite's feet, so element handles are never
kept between reads. Instead every check takes a fresh snapshot: one
``evaluate_all`` call that reads all matched elements at the same
instant and returns plain values.
"""

from __future__ import annotations

from dataclasses import dataclass

from playwright.sync_api import Locator

# Visibility and enabled state follow Playwright's own definitions:
# visible = non-empty bounding box and not visibility:hidden,
# enabled = not :disabled and not aria-disabled.
_SNAPSHOT_JS = """
elements => elements.map(el => {
    const rect = el.getBoundingClientRect();
    const style = window.getComputedStyle(el);
    return {
        text: el.textContent || "",
        visible: rect.width > 0 && rect.height > 0 && style.visibility !== "hidden",
        enabled: !el.matches(":disabled") && el.getAttribute("aria-disabled") !== "true",
        classes: Array.from(el.classList),
    };
})
"""


@dataclass(frozen=True)
class ElementState:
    text: str
    visible: bool
    enabled: bool
    classes: tuple[str, ...]


@dataclass(frozen=True)
class LocatorSnapshot:
    """Everything a locator matched at one instant."""

    elements: tuple[ElementState, ...]

    @property
    def count(self) -> int:
        return len(self.elements)

    @property
    def texts(self) -> list[str]:
        return [element.text for element in self.elements]

    @property
    def visible(self) -> bool:
        return bool(self.elements) and all(element.visible for element in self.elements)

    @property
    def any_visible(self) -> bool:
        return any(element.visible for element in self.elements)

    @property
    def enabled(self) -> bool:
        return bool(self.elements) and all(element.enabled for element in self.elements)

    def single(self) -> ElementState | None:
        """Return the only element, or None when the match count is not one."""
        if len(self.elements) != 1:
            return None
        return self.elements[0]


def take_snapshot(locator: Locator) -> LocatorSnapshot:
    """
    Read the current state of every element the locator matches.

    Text is textContent with surrounding whitespace removed; inner
    whitespace is kept as rendered in the DOM.

    Args:
        locator: Playwright locator to resolve now.

    Returns:
        LocatorSnapshot, empty when nothing matches.
    """
    raw = locator.evaluate_all(_SNAPSHOT_JS)
    return LocatorSnapshot(
        tuple(
            ElementState(
                text=item["text"].strip(),
                visible=bool(item["visible"]),
                enabled=bool(item["enabled"]),
                classes=tuple(item["classes"]),
            )
            for item in raw
        )
    )
