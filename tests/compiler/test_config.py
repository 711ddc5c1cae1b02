"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest


class TestShoeConfig:
    """Tests for ShoeConfig class."""

    def test_seed_unset(self):
        """Test that no seed means a time-based source."""
        with patch.dict(os.environ, {}, clear=True):
            from config import ShoeConfig

            config = ShoeConfig()

            assert config.seed is None

    def test_seed_from_env(self):
        """Test that the seed is read from the environment."""
        with patch.dict(os.environ, {"RAY_SEED": "42"}):
            from config import ShoeConfig

            config = ShoeConfig()

            assert config.seed == 42

    def test_blank_seed_ignored(self):
        """Test that a blank seed counts as unset."""
        with patch.dict(os.environ, {"RAY_SEED": "  "}):
            from config import _parse_seed

            assert _parse_seed() is None

    def test_defaults(self):
        """Test output defaults."""
        from config import ShoeConfig

        config = ShoeConfig()

        assert config.indent == 4
        assert config.comment_marker == "#"

    def test_frozen(self):
        """Test that ShoeConfig is frozen (immutable)."""
        from config import ShoeConfig

        config = ShoeConfig()

        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            config.indent = 8


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        """Test the default log level."""
        with patch.dict(os.environ, {}, clear=True):
            from config import LoggingConfig

            assert LoggingConfig().level == "WARNING"

    def test_level_from_env(self):
        """Test that the level is read and uppercased."""
        with patch.dict(os.environ, {"RAY_LOG_LEVEL": "debug"}):
            from config import LoggingConfig

            assert LoggingConfig().level == "DEBUG"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_has_nested_configs(self):
        """Test that AppConfig has nested configuration objects."""
        from config import AppConfig

        config = AppConfig()

        assert hasattr(config, "shoe")
        assert hasattr(config, "logging")
