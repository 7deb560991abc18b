"""
Tests for config.py - defaults, validation and environment overrides.
"""

import pytest
import sys
import os

# Add source root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import ConfigError, GameConfig, load_config
from domain.constants import DEFAULT_COLORS, DEFAULT_KEYBINDINGS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("SNAKE_"):
            monkeypatch.delenv(key)


class TestGameConfig:
    """Tests for GameConfig defaults and validation."""

    def test_defaults(self):
        """Defaults match the classic board."""
        config = GameConfig()
        assert (config.width, config.height) == (27, 20)
        assert config.tile_size == (50, 50)
        assert config.tile_margin == (4, 4)
        assert config.tick_period_ms == 100
        assert config.restart_delay_ms == 1500
        assert config.keybindings == DEFAULT_KEYBINDINGS
        assert config.colors == DEFAULT_COLORS
        assert config.resume_after_loss is False

    def test_logical_size(self):
        """Logical size is tiles times tile size."""
        assert GameConfig().logical_size == (1350, 1000)

    def test_instances_do_not_share_dicts(self):
        """Each config gets its own bindings and colors."""
        first = GameConfig()
        first.colors["food"] = "#FFFFFF"
        assert GameConfig().colors["food"] == DEFAULT_COLORS["food"]

    def test_board_too_small_for_start(self):
        """The starting snake must fit on the board."""
        with pytest.raises(ConfigError):
            GameConfig(width=12).validate()
        with pytest.raises(ConfigError):
            GameConfig(height=10).validate()

    def test_non_positive_period(self):
        """Tick period must be positive."""
        with pytest.raises(ConfigError):
            GameConfig(tick_period_ms=0).validate()

    def test_margin_swallows_tile(self):
        """A margin of half the tile leaves nothing to draw."""
        with pytest.raises(ConfigError):
            GameConfig(tile_size=(10, 10), tile_margin=(5, 1)).validate()

    def test_missing_binding(self):
        """All four directions need a key."""
        with pytest.raises(ConfigError, match="down"):
            GameConfig(keybindings={"left": 37, "up": 38, "right": 39}).validate()

    def test_unknown_binding_name(self):
        """Names other than the four directions are rejected up front."""
        bindings = dict(DEFAULT_KEYBINDINGS, jump=32)
        with pytest.raises(ConfigError, match="jump"):
            GameConfig(keybindings=bindings).validate()

    def test_config_error_is_value_error(self):
        """ConfigError can be caught as ValueError."""
        assert issubclass(ConfigError, ValueError)

    def test_with_overrides_skips_none(self):
        """None means 'keep the current value'."""
        config = GameConfig().with_overrides(width=30, height=None)
        assert config.width == 30
        assert config.height == 20


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_environment_gives_defaults(self):
        """Without SNAKE_* variables the defaults are used."""
        assert load_config(dotenv=False) == GameConfig()

    def test_environment_overrides(self, monkeypatch):
        """SNAKE_* variables override the defaults."""
        monkeypatch.setenv("SNAKE_WIDTH", "40")
        monkeypatch.setenv("SNAKE_HEIGHT", "30")
        monkeypatch.setenv("SNAKE_TILE_SIZE", "20x10")
        monkeypatch.setenv("SNAKE_TILE_MARGIN", "2")
        monkeypatch.setenv("SNAKE_TICK_PERIOD_MS", "80")
        monkeypatch.setenv("SNAKE_RESTART_DELAY_MS", "0")
        monkeypatch.setenv("SNAKE_RESUME_AFTER_LOSS", "true")
        monkeypatch.setenv("SNAKE_COLOR_FOOD", "#FF0000")

        config = load_config(dotenv=False)
        assert (config.width, config.height) == (40, 30)
        assert config.tile_size == (20, 10)
        assert config.tile_margin == (2, 2)
        assert config.tick_period_ms == 80
        assert config.restart_delay_ms == 0
        assert config.resume_after_loss is True
        assert config.colors["food"] == "#FF0000"
        assert config.colors["head"] == DEFAULT_COLORS["head"]

    def test_bad_integer(self, monkeypatch):
        """Non-numeric values raise ConfigError."""
        monkeypatch.setenv("SNAKE_WIDTH", "wide")
        with pytest.raises(ConfigError, match="SNAKE_WIDTH"):
            load_config(dotenv=False)

    def test_bad_pair(self, monkeypatch):
        """Tile sizes need one or two numbers."""
        monkeypatch.setenv("SNAKE_TILE_SIZE", "1x2x3")
        with pytest.raises(ConfigError):
            load_config(dotenv=False)

    def test_bad_boolean(self, monkeypatch):
        """Booleans accept the usual spellings only."""
        monkeypatch.setenv("SNAKE_RESUME_AFTER_LOSS", "maybe")
        with pytest.raises(ConfigError):
            load_config(dotenv=False)

    def test_invalid_combination(self, monkeypatch):
        """Loaded values are validated."""
        monkeypatch.setenv("SNAKE_HEIGHT", "5")
        with pytest.raises(ConfigError):
            load_config(dotenv=False)

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """A .env file in the working directory is honoured."""
        (tmp_path / ".env").write_text("SNAKE_TICK_PERIOD_MS=250\n")
        monkeypatch.chdir(tmp_path)
        try:
            config = load_config()
        finally:
            os.environ.pop("SNAKE_TICK_PERIOD_MS", None)
        assert config.tick_period_ms == 250
