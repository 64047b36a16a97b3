"""
Command-line entry point: run the Todo List scenarios outside pytest.

Exit codes follow a three-state convention so that CI can distinguish
"a scenario failed" from "the command itself failed":

- ``0``: every scenario passed
- ``1``: at least one scenario failed
- ``2``: the command failed (bad configuration, unreachable target,
  browser could not start)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from playwright.sync_api import Error as PlaywrightError

from config import SUPPORTED_BROWSERS, load_settings
from todo_suite.errors import ConfigurationError, NavigationFailure
from todo_suite.live_target import wait_for_target
from todo_suite.runner import ScenarioRunner
from todo_suite.scenarios import select

logger = logging.getLogger(__name__)

EXIT_PASS = 0
EXIT_SCENARIO_FAILURE = 1
EXIT_SCRIPT_ERROR = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the scenario runner."""
    parser = argparse.ArgumentParser(
        prog="todo-suite",
        description="Run the Todo List end-to-end scenarios in a real browser.",
    )
    parser.add_argument("--env", help="Configuration environment (local, ci, testing)")
    parser.add_argument("--config", dest="config_file", help="YAML file with setting overrides")
    parser.add_argument("--base-url", help="Entry page URL")
    parser.add_argument("--browser", choices=SUPPORTED_BROWSERS, help="Browser engine")
    parser.add_argument(
        "--headed",
        dest="headless",
        action="store_false",
        default=None,
        help="Show the browser window",
    )
    parser.add_argument("--workers", type=int, help="Scenarios to run in parallel")
    parser.add_argument(
        "--timeout",
        dest="scenario_timeout",
        type=float,
        help="Per-scenario timeout in seconds",
    )
    parser.add_argument("--suite-timeout", type=float, help="Whole-run timeout in seconds")
    parser.add_argument(
        "--assert-timeout",
        dest="assertion_timeout",
        type=float,
        help="Seconds each assertion keeps polling",
    )
    parser.add_argument("-k", dest="keyword", help="Only run scenarios whose name contains this")
    parser.add_argument("--list", action="store_true", help="List scenarios and exit")
    parser.add_argument(
        "--skip-preflight",
        action="store_true",
        help="Do not check that the target site is reachable first",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    scenarios = select(args.keyword)
    if args.list:
        for scenario in scenarios:
            print(scenario.name)
        return EXIT_PASS
    if not scenarios:
        print(f"No scenario matches {args.keyword!r}", file=sys.stderr)
        return EXIT_SCRIPT_ERROR

    try:
        settings = load_settings(
            args.env,
            args.config_file,
            base_url=args.base_url,
            browser=args.browser,
            headless=args.headless,
            workers=args.workers,
            scenario_timeout=args.scenario_timeout,
            suite_timeout=args.suite_timeout,
            assertion_timeout=args.assertion_timeout,
        )
        if not args.skip_preflight:
            wait_for_target(settings.base_url)
        report = ScenarioRunner(settings).run(scenarios)
    except (ConfigurationError, NavigationFailure, PlaywrightError) as exc:
        logger.error("Run aborted: %s", exc)
        return EXIT_SCRIPT_ERROR

    print(report.render())
    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
