"""Shared test fixtures and utilities."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from webrunner.config import GroupConfig

FREE_PORT = 8123


@pytest.fixture
def port_finder() -> AsyncMock:
    """Port finder that always reports FREE_PORT."""
    return AsyncMock(return_value=FREE_PORT)


@pytest.fixture
def group_collector() -> AsyncMock:
    """Group collector returning one group per pattern, named after it."""
    async def collect(patterns: list[str]) -> list[GroupConfig]:
        return [GroupConfig(name=f"from-{pattern}") for pattern in patterns]

    return AsyncMock(side_effect=collect)


@pytest.fixture
def groups_dir(tmp_path: Path) -> Path:
    """Create a directory of YAML group config files.

    Returns:
        The tmp_path the groups directory was created in.
    """
    groups = tmp_path / "groups"
    groups.mkdir()
    (groups / "firefox.config.yaml").write_text(
        "files: test/firefox/**/*.test.js\n"
        "browsers:\n"
        "  - firefox\n"
    )
    (groups / "unit.yaml").write_text(
        "name: unit-tests\n"
        "files:\n"
        "  - test/unit/**/*.test.js\n"
    )
    return tmp_path
