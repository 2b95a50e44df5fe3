"""Configuration loading for the task board.

Settings live in a TOML file (``taskboard.toml`` by default). Every section is
optional; missing keys fall back to the dataclass defaults.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from .search.ranker import DEFAULT_LIMIT
from .search.types import ScoringWeights

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("taskboard.toml")
CONFIG_ENV_VAR = "TASKBOARD_CONFIG"


@dataclass(frozen=True)
class BoardConfig:
    """Where the board lives on disk."""

    path: Path = Path(".")


@dataclass(frozen=True)
class SearchConfig:
    """Search modal and ranking settings."""

    limit: int = DEFAULT_LIMIT
    debounce_ms: int = 0
    scoring: ScoringWeights = field(default_factory=ScoringWeights)

    def __post_init__(self) -> None:
        if not isinstance(self.limit, int) or self.limit < 1:
            raise ValueError(f"Invalid search limit: {self.limit!r}")
        if not isinstance(self.debounce_ms, int) or self.debounce_ms < 0:
            raise ValueError(f"Invalid debounce_ms: {self.debounce_ms!r}")


@dataclass(frozen=True)
class DisplayConfig:
    """What to show next to each search result."""

    show_priority: bool = True
    show_location: bool = True


@dataclass(frozen=True)
class Config:
    """Top-level configuration."""

    board: BoardConfig = field(default_factory=BoardConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section [{name}] must be a table")
    return value


def _build_config(data: dict[str, Any]) -> Config:
    board = _section(data, "board")
    search = dict(_section(data, "search"))
    display = _section(data, "display")

    scoring = search.pop("scoring", {})
    if not isinstance(scoring, dict):
        raise ValueError("Config section [search.scoring] must be a table")

    try:
        return Config(
            board=BoardConfig(path=Path(board.get("path", "."))),
            search=SearchConfig(scoring=ScoringWeights(**scoring), **search),
            display=DisplayConfig(**display),
        )
    except TypeError as e:
        # Unknown keys surface as TypeError from the dataclass constructors
        raise ValueError(f"Invalid configuration: {e}") from e


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Pick the config path: explicit argument, then env var, then default."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from a TOML file.

    Args:
        path: Config file path. See ``resolve_config_path`` for the fallback
            order when omitted.

    Returns:
        Config instance. Defaults are used when the file does not exist.

    Raises:
        ValueError: If the file is not valid TOML or holds invalid values.
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return Config()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return _build_config(data)
