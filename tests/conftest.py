"""
Shared pytest fixtures and configuration for ConfigKeeper tests.

This module provides registries pre-populated with sample entries, a
temporary application-data directory, and mocks for interactive prompts
and logging.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

_REPO_ROOT = Path(__file__).resolve().parent.parent

# Put `src/` first so `import configkeeper` uses workspace code.
sys.path.insert(0, str(_REPO_ROOT / "src"))

from configkeeper.core.config import (  # noqa: E402
    ChangePipeline,
    ConfigManager,
    ConfigRegistry,
    EntryDescriptor,
    EntryType,
    reset_manager_for_tests,
)


# ============================================================================
# Registry Fixtures
# ============================================================================

def sample_descriptors() -> list[EntryDescriptor]:
    return [
        EntryDescriptor("volume", EntryType.COUNT, "50", location="audio"),
        EntryDescriptor("muted", EntryType.FLAG, "false", location="audio"),
        EntryDescriptor("player_name", EntryType.TEXT, "Player", location="profile"),
        EntryDescriptor("theme", EntryType.CHOICE, "dark", location="display.advanced"),
        EntryDescriptor("debug_overlay", EntryType.FLAG, "false", location="display", visible=False),
    ]


@pytest.fixture
def registry() -> ConfigRegistry:
    """Registry with the sample entries registered but no values loaded."""
    reg = ConfigRegistry()
    reg.register_many(sample_descriptors())
    return reg


@pytest.fixture
def pipeline(registry: ConfigRegistry) -> ChangePipeline:
    return ChangePipeline(registry)


@pytest.fixture
def loaded_pipeline(pipeline: ChangePipeline) -> ChangePipeline:
    """Pipeline whose registry already holds its defaults."""
    pipeline.load_defaults()
    return pipeline


@pytest.fixture
def manager(tmp_path: Path) -> ConfigManager:
    mgr = ConfigManager(config_path=tmp_path / "config.xml")
    mgr.register(*sample_descriptors())
    return mgr


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def app_data_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point the per-user application-data directory at a temp folder."""
    path = tmp_path / "appdata"
    monkeypatch.setenv("CONFIGKEEPER_HOME", str(path))
    yield path
    reset_manager_for_tests()


# ============================================================================
# CLI Fixtures
# ============================================================================

@pytest.fixture
def typer_test_client():
    """Typer test client for CLI testing."""
    from typer.testing import CliRunner
    return CliRunner()


@pytest.fixture(autouse=True)
def mock_questionary():
    """Mock questionary for all tests to prevent interactive prompts."""
    mock_confirm_instance = MagicMock()
    mock_confirm_instance.ask.return_value = True

    mock_text_instance = MagicMock()
    mock_text_instance.ask.return_value = ""

    mock_select_instance = MagicMock()
    mock_select_instance.ask.return_value = None

    with patch('questionary.confirm') as mock_confirm, \
         patch('questionary.text') as mock_text, \
         patch('questionary.select') as mock_select:

        mock_confirm.return_value = mock_confirm_instance
        mock_text.return_value = mock_text_instance
        mock_select.return_value = mock_select_instance

        yield {
            'confirm': mock_confirm,
            'text': mock_text,
            'select': mock_select,
        }


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def suppress_logging():
    """Suppress logging output during tests to keep output clean."""
    with patch('configkeeper.core.utils.logger.get_logger') as mock_logger:
        mock_log = MagicMock()
        mock_logger.return_value = mock_log
        yield mock_log


@pytest.fixture
def fresh_pipeline():
    """Factory for a second registry with the same entries and no values."""
    def _create() -> ChangePipeline:
        reg = ConfigRegistry()
        reg.register_many(sample_descriptors())
        return ChangePipeline(reg)
    return _create
