# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Iterator, List

import numpy as np
import pytest

from pyboxscene.config import SceneConfig
from pyboxscene.generator import SceneGenerator
from pyboxscene.logger import LogLevel, SceneLogger, set_logger
from pyboxscene.pointcloud import PointCloud
from pyboxscene.synthetic import generate_plane


@pytest.fixture(autouse=True)
def quiet_logger() -> Iterator[SceneLogger]:
    """Keep test output free of per-tick INFO lines."""
    logger = SceneLogger(mode="console", console_level=LogLevel.ERROR)
    set_logger(logger)
    yield logger
    set_logger(None)


@pytest.fixture(scope="session")
def plane() -> PointCloud:
    """Default 101 x 101 plane, shared read-only across tests."""
    return generate_plane()


@pytest.fixture
def seeded_config() -> SceneConfig:
    return SceneConfig(seed=1234, log_level="ERROR")


@pytest.fixture
def generator(seeded_config: SceneConfig) -> SceneGenerator:
    return SceneGenerator(seeded_config)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(0)


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
