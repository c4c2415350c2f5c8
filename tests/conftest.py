"""Shared fixtures for halfsnap tests."""

from __future__ import annotations

import pytest

from halfsnap.tiling.monitor import Monitor
from halfsnap.tiling.placement import WindowGeometry


class FakeWindow:
    """Stands in for halfsnap.core.window.Window and records every call."""

    def __init__(self, geometry: WindowGeometry, clear_error=None, move_error=None):
        self._geometry = geometry
        self._clear_error = clear_error
        self._move_error = move_error
        self.calls: list[tuple] = []

    def geometry(self) -> WindowGeometry:
        self.calls.append(("geometry",))
        return self._geometry

    def clear_maximized(self) -> None:
        self.calls.append(("clear_maximized",))
        if self._clear_error is not None:
            raise self._clear_error

    def move_resize(self, rect) -> None:
        self.calls.append(("move_resize", rect))
        if self._move_error is not None:
            raise self._move_error


@pytest.fixture
def dual_monitors() -> list[Monitor]:
    """Two 1920x1080 monitors side by side."""
    return [
        Monitor(width=1920, height=1080, offset_x=0, offset_y=0, name="DP-1"),
        Monitor(width=1920, height=1080, offset_x=1920, offset_y=0, name="DP-2"),
    ]


@pytest.fixture
def mixed_monitors() -> list[Monitor]:
    """A 1080p monitor on the left of a taller 1440p one."""
    return [
        Monitor(width=1920, height=1080, offset_x=0, offset_y=0, name="eDP-1"),
        Monitor(width=2560, height=1440, offset_x=1920, offset_y=0, name="HDMI-1"),
    ]
