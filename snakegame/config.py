"""
Game configuration.

Defaults come from domain.constants; any of them can be overridden through
SNAKE_* environment variables (a .env file is honoured via python-dotenv).
"""

import os
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from domain.constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_TILE_SIZE,
    DEFAULT_TILE_MARGIN,
    DEFAULT_TICK_PERIOD_MS,
    DEFAULT_RESTART_DELAY_MS,
    DEFAULT_KEYBINDINGS,
    DEFAULT_COLORS,
    HEADINGS,
    START_BODY,
)


class ConfigError(ValueError):
    """Raised when a configuration value is missing or invalid."""


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tile_size: Tuple[int, int] = DEFAULT_TILE_SIZE
    tile_margin: Tuple[int, int] = DEFAULT_TILE_MARGIN
    tick_period_ms: int = DEFAULT_TICK_PERIOD_MS
    restart_delay_ms: int = DEFAULT_RESTART_DELAY_MS
    keybindings: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYBINDINGS))
    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    resume_after_loss: bool = False

    @property
    def logical_size(self) -> Tuple[int, int]:
        """Size of the board in logical pixels, before surface scaling."""
        return (self.width * self.tile_size[0], self.height * self.tile_size[1])

    def validate(self) -> "GameConfig":
        """Check the configuration and return it, raising ConfigError on problems."""
        max_x = max(x for x, _ in START_BODY)
        max_y = max(y for _, y in START_BODY)
        if self.width <= max_x or self.height <= max_y:
            raise ConfigError(
                f"Board {self.width}x{self.height} is too small for the starting "
                f"snake (needs at least {max_x + 1}x{max_y + 1})."
            )
        if self.tick_period_ms <= 0:
            raise ConfigError(f"tick_period_ms must be positive, got {self.tick_period_ms}")
        if self.restart_delay_ms < 0:
            raise ConfigError(f"restart_delay_ms must not be negative, got {self.restart_delay_ms}")
        for axis in (0, 1):
            if self.tile_size[axis] <= 0:
                raise ConfigError(f"tile_size must be positive, got {self.tile_size}")
            if self.tile_margin[axis] < 0 or self.tile_margin[axis] * 2 >= self.tile_size[axis]:
                raise ConfigError(
                    f"tile_margin {self.tile_margin} leaves no drawable area in tile {self.tile_size}"
                )
        missing = set(DEFAULT_KEYBINDINGS) - set(self.keybindings)
        if missing:
            raise ConfigError(f"Missing key bindings: {sorted(missing)}")
        unknown = set(self.keybindings) - set(HEADINGS)
        if unknown:
            raise ConfigError(
                f"Unknown key binding names: {sorted(unknown)} (expected {sorted(HEADINGS)})"
            )
        missing = set(DEFAULT_COLORS) - set(self.colors)
        if missing:
            raise ConfigError(f"Missing colors: {sorted(missing)}")
        return self

    def with_overrides(self, **changes) -> "GameConfig":
        """Return a copy with the non-None keyword arguments applied."""
        changes = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **changes).validate()


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_pair(name: str) -> Optional[Tuple[int, int]]:
    """Parse 'N' or 'NxM' into a (x, y) pair."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    parts = raw.lower().split("x")
    try:
        values = [int(part) for part in parts]
    except ValueError:
        raise ConfigError(f"{name} must look like '50' or '50x40', got {raw!r}") from None
    if len(values) == 1:
        return (values[0], values[0])
    if len(values) == 2:
        return (values[0], values[1])
    raise ConfigError(f"{name} must look like '50' or '50x40', got {raw!r}")


def _env_bool(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_config(dotenv: bool = True) -> GameConfig:
    """
    Build a GameConfig from defaults plus SNAKE_* environment overrides.

    Args:
        dotenv: whether to load a .env file first

    Returns:
        A validated GameConfig
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    colors = dict(DEFAULT_COLORS)
    for key in DEFAULT_COLORS:
        value = os.getenv(f"SNAKE_COLOR_{key.upper()}")
        if value:
            colors[key] = value

    config = GameConfig(colors=colors)
    return config.with_overrides(
        width=_env_int("SNAKE_WIDTH"),
        height=_env_int("SNAKE_HEIGHT"),
        tile_size=_env_pair("SNAKE_TILE_SIZE"),
        tile_margin=_env_pair("SNAKE_TILE_MARGIN"),
        tick_period_ms=_env_int("SNAKE_TICK_PERIOD_MS"),
        restart_delay_ms=_env_int("SNAKE_RESTART_DELAY_MS"),
        resume_after_loss=_env_bool("SNAKE_RESUME_AFTER_LOSS"),
    )
