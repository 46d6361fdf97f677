"""Shared pytest fixtures: isolated configuration and a recording playerctl fake."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from daspotwidget.features.player import PlayerFacade
from fakes import FakeRunner


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point the config file at a temp location and reset the loaded singleton."""

    import daspotwidget.config.config as config_module

    config_file = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv("DASPOTWIDGET_CONFIG", str(config_file))

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_file
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def facade(fake_runner: FakeRunner) -> PlayerFacade:
    return PlayerFacade(fake_runner)
