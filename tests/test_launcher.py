"""Tests for the launcher's environment hand-off."""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from doomfire.constants import load_config  # noqa: E402
from doomfire.launcher import launch_env  # noqa: E402


def test_launch_env_round_trips_through_config():
    env = launch_env(640, 480, 8, base={"PATH": "/usr/bin", "FIRE_TICK_MS": "20"})

    assert env["PATH"] == "/usr/bin"
    config = load_config(env)
    assert (config.width, config.height, config.cell_size, config.tick_ms) == (640, 480, 8, 20)


def test_launch_env_does_not_mutate_base():
    base = {"FIRE_WIDTH": "1"}
    launch_env(2, 3, 1, base=base)
    assert base == {"FIRE_WIDTH": "1"}
