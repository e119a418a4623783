"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def configs_dir() -> Path:
    """Path to the configs/ directory."""
    return Path(__file__).resolve().parent.parent / "configs"


@pytest.fixture
def default_config(configs_dir: Path) -> dict:
    """Load the default config dict."""
    from treapset.utils.config import load_yaml

    return load_yaml(configs_dir / "default.yaml")


@pytest.fixture(params=["rotation", "split_merge"])
def balancer(request: pytest.FixtureRequest) -> str:
    """Every registered balancing strategy."""
    return request.param
