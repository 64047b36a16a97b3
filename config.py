"""
Suite configuration module.

This module defines configuration classes for the environments the
suite runs in (local, ci, testing). Values are loaded from ``TODO_*``
environment variables with sensible defaults, can be overridden from a
YAML file, and finally from explicit keyword overrides (CLI flags).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Callable

import yaml

from todo_suite.errors import ConfigurationError

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off")



def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"expected true/false, got {value!r}")


def _to_int(value: Any) -> int:
    # bool is an int subclass; "workers: yes" is a mistake, not 1
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


# Keyed by the annotation strings of SuiteSettings fields
_CONVERTERS: dict[str, Callable[[Any], Any]] = {
    "bool": _to_bool,
    "int": _to_int,
    "float": _to_float,
    "str": _to_str,
}


class Config:
    """
    Base configuration with default settings.

    Environment values are kept as the raw strings; load_settings()
    converts and checks them along with YAML and CLI values.
    """

    BASE_URL: str = os.environ.get(
        "TODO_BASE_URL", "https://www.techglobal-training.com/frontend/"
    )
    ENTRY_LINK: str = os.environ.get("TODO_ENTRY_LINK", "Todo List")
    BROWSER: str = os.environ.get("TODO_BROWSER", "chromium")
    HEADLESS: str | bool = os.environ.get("TODO_HEADLESS", True)
    WORKERS: str | int = os.environ.get("TODO_WORKERS", 1)

    # All timeouts are in seconds
    ASSERTION_TIMEOUT: str | float = os.environ.get("TODO_ASSERT_TIMEOUT", 5.0)
    POLL_INTERVAL: str | float = os.environ.get("TODO_POLL_INTERVAL", 0.1)
    SCENARIO_TIMEOUT: str | float = os.environ.get("TODO_SCENARIO_TIMEOUT", 60)
    SUITE_TIMEOUT: str | float = os.environ.get("TODO_SUITE_TIMEOUT", 600)

    SCREENSHOT_DIR: str = os.environ.get(
        "TODO_SCREENSHOT_DIR", "test-results/screenshots"
    )


class LocalConfig(Config):
    """Local debugging configuration: a visible browser, one scenario at a time."""

    HEADLESS: str | bool = os.environ.get("TODO_HEADLESS", False)
    WORKERS: int = 1


class CIConfig(Config):
    """Continuous integration configuration."""

    HEADLESS: bool = True
    WORKERS: str | int = os.environ.get("TODO_WORKERS", 3)
    ASSERTION_TIMEOUT: str | float = os.environ.get("TODO_ASSERT_TIMEOUT", 10.0)


class TestingConfig(Config):
    """Configuration for the suite's own unit tests."""

    BASE_URL: str = "http://127.0.0.1:5001/"
    ASSERTION_TIMEOUT: float = 1.0
    POLL_INTERVAL: float = 0.05
    SCENARIO_TIMEOUT: float = 30.0
    SUITE_TIMEOUT: float = 120.0


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "testing": TestingConfig,
    "default": Config,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci, testing).
             If None, uses TODO_SUITE_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TODO_SUITE_ENV", "default")
    return config.get(env, config["default"])


@dataclass(frozen=True)
class SuiteSettings:
    """Resolved, validated settings handed to page objects and the runner."""

    base_url: str
    entry_link: str
    browser: str
    headless: bool
    workers: int
    assertion_timeout: float
    poll_interval: float
    scenario_timeout: float
    suite_timeout: float
    screenshot_dir: str

    @classmethod
    def from_config(cls, config_class: type[Config]) -> "SuiteSettings":
        return cls(
            base_url=config_class.BASE_URL,
            entry_link=config_class.ENTRY_LINK,
            browser=config_class.BROWSER,
            headless=config_class.HEADLESS,
            workers=config_class.WORKERS,
            assertion_timeout=config_class.ASSERTION_TIMEOUT,
            poll_interval=config_class.POLL_INTERVAL,
            scenario_timeout=config_class.SCENARIO_TIMEOUT,
            suite_timeout=config_class.SUITE_TIMEOUT,
            screenshot_dir=config_class.SCREENSHOT_DIR,
        )

    def coerced(self) -> "SuiteSettings":
        """
        Convert every field to its declared type.

        Environment variables arrive as strings and YAML values may have
        the wrong type, so "3" becomes 3 and "false" becomes False.

        Raises:
            ConfigurationError: If a value cannot be converted.
        """
        converted = {}
        for item in fields(self):
            value = getattr(self, item.name)
            try:
                converted[item.name] = _CONVERTERS[item.type](value)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"Invalid value for {item.name}: {exc}") from exc
        return replace(self, **converted)

    def validate(self) -> "SuiteSettings":
        """
        Check types and value ranges.

        Returns:
            A copy with every field converted to its declared type.

        Raises:
            ConfigurationError: If any setting has the wrong type or is out of range.
        """
        settings = self.coerced()
        if settings.browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"Unsupported browser {settings.browser!r}; "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )
        if not settings.base_url:
            raise ConfigurationError("base_url must not be empty")
        if settings.workers < 1:
            raise ConfigurationError("workers must be >= 1")
        for name in ("assertion_timeout", "scenario_timeout", "suite_timeout"):
            if getattr(settings, name) <= 0:
                raise ConfigurationError(f"{name} must be > 0")
        if settings.poll_interval <= 0 or settings.poll_interval > settings.assertion_timeout:
            raise ConfigurationError(
                "poll_interval must be > 0 and not larger than assertion_timeout"
            )
        return settings


def _load_yaml_overrides(path: Path) -> dict[str, Any]:
    """
    Read setting overrides from a YAML mapping.

    Args:
        path: YAML file whose top-level keys are SuiteSettings field names.

    Returns:
        Mapping of field name to value.

    Raises:
        ConfigurationError: If the file is missing, malformed or has unknown keys.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    known = {field.name for field in fields(SuiteSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown settings in {path}: {', '.join(unknown)}"
        )
    return data


def load_settings(
    env: str | None = None,
    config_file: str | Path | None = None,
    **overrides: Any,
) -> SuiteSettings:
    """
    Build validated settings.

    Precedence, lowest first: configuration class for ``env``, YAML file,
    keyword overrides. Overrides whose value is None are ignored so CLI
    flags that were not given fall through.

    Args:
        env: Environment name passed to get_config().
        config_file: Optional YAML file with setting overrides.
        **overrides: Explicit setting values.

    Returns:
        Validated SuiteSettings.
    """
    settings = SuiteSettings.from_config(get_config(env))

    if config_file is not None:
        settings = replace(settings, **_load_yaml_overrides(Path(config_file)))

    explicit = {key: value for key, value in overrides.items() if value is not None}
    if explicit:
        try:
            settings = replace(settings, **explicit)
        except TypeError as exc:
            raise ConfigurationError(str(exc)) from exc

    return settings.validate()
