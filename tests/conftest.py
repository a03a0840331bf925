"""Shared pytest fixtures."""

import logging
import os

import pytest
from hypothesis import HealthCheck, settings

from graph_components.config import Settings
from graph_components.editor import GraphEditor
from graph_components.logging import configure_logging

# Hypothesis settings profiles for different environments
settings.register_profile("fast", max_examples=25)
settings.register_profile(
    "ci",
    max_examples=300,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "fast"))


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    """Keep library log lines out of captured stdout."""
    configure_logging(level=logging.WARNING)


@pytest.fixture(autouse=True)
def _isolate_settings_from_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent a local .env file or exported variables from leaking into tests."""
    monkeypatch.setattr(
        Settings,
        "model_config",
        {**Settings.model_config, "env_file": None},
    )
    for key in list(os.environ):
        if key.startswith("GRAPH_COMPONENTS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def editor() -> GraphEditor:
    return GraphEditor()


@pytest.fixture
def chain_edges() -> list[tuple[str, str]]:
    """v1 - v2 - v3 - v4 as a path."""
    return [("v1", "v2"), ("v2", "v3"), ("v3", "v4")]
