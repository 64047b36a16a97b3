"""
Scenario model and runner.

A Scenario is a named, ordered list of Steps. The runner gives each
scenario a fresh browser context, runs the common setup hook (open the
Todo List app), then the steps in order. The first failing step fails
the scenario and the remaining steps are reported as skipped; other
scenarios are unaffected.

State per scenario: pending -> running -> passed | failed.
"""

from __future__ import annotations

import logging
import time
import traceback
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Browser, Page, sync_playwright

from config import SuiteSettings
from todo_suite.errors import ScenarioTimeout, SuiteError
from todo_suite.pages.todo_list_page import TodoListPage

logger = logging.getLogger(__name__)

SETUP_STEP = "Navigate to the Todo List app"

BROWSER_CONTEXT_ARGS = {
    "viewport": {"width": 1280, "height": 720},
    "ignore_https_errors": True,
}

StepAction = Callable[[TodoListPage], None]


class ScenarioState(str, Enum):
    """Lifecycle of one scenario run."""

    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


class StepOutcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class Step:
    description: str
    action: StepAction


class Scenario:
    """
    A named sequence of steps run against a freshly opened Todo List app.

    Steps are usually registered with the :meth:`step` decorator::

        adding = Scenario("Adding a task")

        @adding.step("Add a task")
        def _add(todo):
            todo.add_task("clean")
    """

    def __init__(self, name: str, steps: Sequence[Step] | None = None):
        self.name = name
        self.steps: list[Step] = list(steps or [])

    def step(self, description: str) -> Callable[[StepAction], StepAction]:
        """Register the decorated function as the next step."""

        def register(action: StepAction) -> StepAction:
            self.steps.append(Step(description, action))
            return action

        return register

    def __repr__(self) -> str:
        return f"<Scenario {self.name!r} ({len(self.steps)} steps)>"


@dataclass
class StepResult:
    description: str
    outcome: StepOutcome
    error: Optional[str] = None
    duration_ms: int = 0

    @property
    def passed(self) -> bool:
        return self.outcome is StepOutcome.PASSED


@dataclass
class ScenarioResult:
    """Outcome of one scenario, including every step's outcome."""

    name: str
    state: ScenarioState = ScenarioState.PENDING
    steps: list[StepResult] = field(default_factory=list)
    error: Optional[str] = None
    duration_ms: int = 0
    screenshot: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.state is ScenarioState.PASSED

    @property
    def failed_step(self) -> Optional[StepResult]:
        for step in self.steps:
            if step.outcome is StepOutcome.FAILED:
                return step
        return None

    def failure_summary(self) -> str:
        """One readable block naming the failing step and its error."""
        if self.passed:
            return f"{self.name}: passed"
        step = self.failed_step
        lines = [f"{self.name}: failed"]
        if step is not None:
            lines.append(f"  step: {step.description}")
        if self.error:
            lines.append(f"  error: {self.error}")
        if self.screenshot:
            lines.append(f"  screenshot: {self.screenshot}")
        return "\n".join(lines)


@dataclass
class SuiteReport:
    """Aggregate of all scenario results, in the order they were given."""

    results: list[ScenarioResult]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def exit_code(self) -> int:
        return 0 if self.failed == 0 else 1

    def render(self) -> str:
        lines = ["", "Scenario results", "-" * 60]
        for result in self.results:
            lines.append(
                f"{result.state.value.upper():<7} {result.name} ({result.duration_ms} ms)"
            )
            if not result.passed:
                lines.extend(
                    f"        {line.strip()}" for line in result.failure_summary().splitlines()[1:]
                )
        lines.append("-" * 60)
        lines.append(f"Total: {self.total}  Passed: {self.passed}  Failed: {self.failed}")
        return "\n".join(lines)


def _elapsed_ms(start: float, end: float) -> int:
    return int((end - start) * 1000)


class ScenarioRunner:
    """
    Runs scenarios and records their outcomes.

    Args:
        settings: Resolved suite settings.
        page_factory: Builds the page object handed to each step.
        clock: Monotonic time source.
    """

    def __init__(
        self,
        settings: SuiteSettings,
        page_factory: Callable[[Page, SuiteSettings], TodoListPage] = TodoListPage,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings
        self._page_factory = page_factory
        self._clock = clock

    # -------------------------------------------------------------------------
    # Single scenario
    # -------------------------------------------------------------------------

    def run_scenario(
        self,
        scenario: Scenario,
        page: Page,
        deadline: Optional[float] = None,
    ) -> ScenarioResult:
        """
        Run one scenario on an already created page.

        Args:
            scenario: Scenario to run.
            page: Fresh Playwright page owned by this scenario.
            deadline: Optional suite deadline on the runner's clock.

        Returns:
            ScenarioResult in the passed or failed state.
        """
        result = ScenarioResult(scenario.name)
        started = self._clock()
        limit = started + self.settings.scenario_timeout
        if deadline is not None:
            limit = min(limit, deadline)

        result.state = ScenarioState.RUNNING
        logger.info("Scenario started: %s", scenario.name)

        todo = self._page_factory(page, self.settings)
        plan = [Step(SETUP_STEP, lambda todo_page: todo_page.open()), *scenario.steps]

        for step in plan:
            if result.state is ScenarioState.FAILED:
                result.steps.append(StepResult(step.description, StepOutcome.SKIPPED))
                continue

            step_result = self._run_step(step, todo, limit)
            result.steps.append(step_result)
            if not step_result.passed:
                result.state = ScenarioState.FAILED
                result.error = step_result.error
                logger.error(
                    "Scenario %s failed at step %r: %s",
                    scenario.name,
                    step.description,
                    step_result.error,
                )
                result.screenshot = self._capture(todo, scenario.name)

        if result.state is ScenarioState.RUNNING:
            result.state = ScenarioState.PASSED

        result.duration_ms = _elapsed_ms(started, self._clock())
        logger.info(
            "Scenario %s: %s (%d ms)", scenario.name, result.state.value, result.duration_ms
        )
        return result

    def _run_step(self, step: Step, todo: TodoListPage, limit: float) -> StepResult:
        started = self._clock()
        if started >= limit:
            error = ScenarioTimeout(f"Timed out before step {step.description!r}")
            return StepResult(
                step.description, StepOutcome.FAILED, f"{type(error).__name__}: {error}"
            )

        try:
            step.action(todo)
        except SuiteError as exc:
            outcome, error_text = StepOutcome.FAILED, f"{type(exc).__name__}: {exc}"
        except Exception:
            outcome, error_text = StepOutcome.FAILED, traceback.format_exc(limit=20)
        else:
            outcome, error_text = StepOutcome.PASSED, None

        return StepResult(
            step.description, outcome, error_text, _elapsed_ms(started, self._clock())
        )

    def _capture(self, todo: TodoListPage, name: str) -> Optional[str]:
        try:
            path = todo.take_screenshot(name)
        except (PlaywrightError, OSError) as exc:
            logger.warning("Failed to capture screenshot for %s: %s", name, exc)
            return None
        logger.info("Screenshot saved: %s", path)
        return path

    def _timed_out(self, scenario: Scenario) -> ScenarioResult:
        return self._not_started(
            scenario, ScenarioTimeout("Suite timeout reached before the scenario started")
        )

    def _not_started(self, scenario: Scenario, error: Exception) -> ScenarioResult:
        return ScenarioResult(
            scenario.name,
            state=ScenarioState.FAILED,
            steps=[
                StepResult(description, StepOutcome.SKIPPED)
                for description in [SETUP_STEP, *(step.description for step in scenario.steps)]
            ],
            error=f"{type(error).__name__}: {error}",
        )

    # -------------------------------------------------------------------------
    # Whole suite
    # -------------------------------------------------------------------------

    def run(self, scenarios: Sequence[Scenario]) -> SuiteReport:
        """
        Run every scenario, spreading them over ``settings.workers`` threads.

        Each worker thread owns its own Playwright instance and browser;
        each scenario gets its own context and page.

        Returns:
            SuiteReport with results in input order.
        """
        scenarios = list(scenarios)
        if not scenarios:
            return SuiteReport([])

        deadline = self._clock() + self.settings.suite_timeout
        workers = min(self.settings.workers, len(scenarios))
        batches = [list(range(offset, len(scenarios), workers)) for offset in range(workers)]
        results: list[Optional[ScenarioResult]] = [None] * len(scenarios)

        logger.info(
            "Running %d scenario(s) on %s with %d worker(s)",
            len(scenarios),
            self.settings.browser,
            workers,
        )
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scenario") as pool:
            futures = [
                pool.submit(self._run_batch, [scenarios[index] for index in batch], deadline)
                for batch in batches
            ]
            for batch, future in zip(batches, futures):
                for index, result in zip(batch, future.result()):
                    results[index] = result

        return SuiteReport(results)

    def _run_batch(self, batch: list[Scenario], deadline: float) -> list[ScenarioResult]:
        results = []
        with sync_playwright() as playwright:
            browser: Browser = getattr(playwright, self.settings.browser).launch(
                headless=self.settings.headless
            )
            try:
                for scenario in batch:
                    if self._clock() >= deadline:
                        logger.error("Suite timeout reached; skipping %s", scenario.name)
                        results.append(self._timed_out(scenario))
                        continue
                    results.append(self._run_in_context(browser, scenario, deadline))
            finally:
                try:
                    browser.close()
                except PlaywrightError as exc:
                    logger.warning("Failed to close the browser: %s", exc)
        return results

    def _run_in_context(
        self, browser: Browser, scenario: Scenario, deadline: float
    ) -> ScenarioResult:
        context = None
        try:
            context = browser.new_context(**BROWSER_CONTEXT_ARGS)
            page = context.new_page()
        except PlaywrightError as exc:
            logger.error("Could not open a page for %s: %s", scenario.name, exc)
            if context is not None:
                self._close_context(context, scenario)
            return self._not_started(scenario, exc)

        try:
            return self.run_scenario(scenario, page, deadline)
        finally:
            self._close_context(context, scenario)

    def _close_context(self, context, scenario: Scenario) -> None:
        try:
            context.close()
        except PlaywrightError as exc:
            logger.warning("Failed to close the context of %s: %s", scenario.name, exc)
