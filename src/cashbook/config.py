"""
Configuration helpers for cashbook.

This module is responsible for:
- locating the engine configuration file (option, environment, default),
- loading it from TOML,
- exposing the typed ``EngineConfig`` used by the reporting engine.

A missing file or missing keys fall back to the built-in defaults.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import tomllib

from cashbook.domain.classifier import DEFAULT_KEYWORDS, ClassificationKeywords
from cashbook.domain.errors import ValidationError

CONFIG_ENV_VAR = "CASHBOOK_CONFIG"
DEFAULT_CARD_DUE_DAY = 10
DEFAULT_DUE_SOON_DAYS = 7


@dataclass(frozen=True)
class EngineConfig:
    """Settings of the reporting engine."""

    keywords: ClassificationKeywords = field(default_factory=lambda: DEFAULT_KEYWORDS)
    card_due_day: int = DEFAULT_CARD_DUE_DAY
    due_soon_days: int = DEFAULT_DUE_SOON_DAYS


def default_config_path() -> Path:
    """Return the default configuration file location."""
    return Path.home() / ".cashbook" / "config.toml"


def _keyword_list(section: Mapping[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"classification.{key} must be a list of strings")
    return tuple(value)


def _int_setting(section: Mapping[str, Any], key: str, default: int, low: int, high: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{key} must be an integer")
    if not low <= value <= high:
        raise ValidationError(f"{key} must be between {low} and {high}, got {value}")
    return value


def parse_config(data: Mapping[str, Any]) -> EngineConfig:
    """Build an EngineConfig from parsed TOML data."""
    classification = data.get("classification", {})
    cards = data.get("cards", {})
    aging = data.get("aging", {})

    keywords = ClassificationKeywords(
        deduction=_keyword_list(classification, "deduction_keywords", DEFAULT_KEYWORDS.deduction),
        cost=_keyword_list(classification, "cost_keywords", DEFAULT_KEYWORDS.cost),
    )
    return EngineConfig(
        keywords=keywords,
        card_due_day=_int_setting(cards, "due_day", DEFAULT_CARD_DUE_DAY, 1, 31),
        due_soon_days=_int_setting(aging, "due_soon_days", DEFAULT_DUE_SOON_DAYS, 0, 365),
    )


def load_config(config_path: Optional[str] = None) -> EngineConfig:
    """Load engine configuration.

    Args:
        config_path: Path to a TOML file. If None, checks CASHBOOK_CONFIG
            environment variable, then defaults to ~/.cashbook/config.toml

    Returns:
        EngineConfig; defaults when no file exists

    Raises:
        ValidationError: If the file is not valid TOML or holds invalid values
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or None

    path = Path(config_path) if config_path is not None else default_config_path()
    if not path.exists():
        if config_path is not None:
            raise ValidationError(f"Config file '{path}' not found")
        return EngineConfig()

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as e:
        raise ValidationError(f"Invalid config file '{path}': {e}") from e

    return parse_config(data)
