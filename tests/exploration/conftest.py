"""Pytest configuration for exploration domain tests.

Robots and threat lists are built directly in memory; no fixtures touch the
filesystem.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from domain.exploration.robot import Robot
from domain.exploration.value_objects import ThreatLocation


@pytest.fixture
def make_robot() -> Callable[..., Robot]:
    """Factory for a robot on a 5x5 field starting at the origin facing north."""

    def _make(
        commands: str = "",
        initial_position: str = "0 0 N",
        threats: list[ThreatLocation] | None = None,
        max_x: int = 5,
        max_y: int = 5,
        **kwargs,
    ) -> Robot:
        return Robot(
            threats, "R2", initial_position, commands, max_x, max_y, **kwargs
        )

    return _make


@pytest.fixture
def bomb_at_0_1() -> list[ThreatLocation]:
    return [ThreatLocation(x=0, y=1, kind="bomb")]
