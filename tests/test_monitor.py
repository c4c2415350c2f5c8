"""Tests for the monitor registry."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from Xlib import error

from halfsnap.core import xlib
from halfsnap.core.errors import MonitorQueryError, NoMonitorsError
from halfsnap.tiling.monitor import Monitor, OutputInfo, build_monitors, get_monitors


def _output(name, x=0, y=0, width=1920, height=1080, connected=True, crtc=63):
    return OutputInfo(name=name, connected=connected, crtc=crtc, x=x, y=y, width=width, height=height)


class TestMonitor:
    def test_rect_and_right(self):
        mon = Monitor(width=2560, height=1440, offset_x=1920, offset_y=0)

        assert mon.right == 4480
        assert mon.rect.x == 1920
        assert mon.rect.h == 1440

    @pytest.mark.parametrize("width,height", [(0, 1080), (1920, 0), (-1, 1080)])
    def test_rejects_empty_dimensions(self, width, height):
        with pytest.raises(ValueError):
            Monitor(width=width, height=height)

    @pytest.mark.parametrize("offset_x,offset_y", [(-1920, 0), (0, -1080)])
    def test_rejects_negative_offsets(self, offset_x, offset_y):
        with pytest.raises(ValueError):
            Monitor(width=1920, height=1080, offset_x=offset_x, offset_y=offset_y)


class TestBuildMonitors:
    def test_sorted_left_to_right(self):
        outputs = [
            _output("HDMI-1", x=3840),
            _output("eDP-1", x=0),
            _output("DP-1", x=1920),
        ]

        monitors = build_monitors(outputs)

        assert [m.name for m in monitors] == ["eDP-1", "DP-1", "HDMI-1"]
        assert [m.offset_x for m in monitors] == [0, 1920, 3840]

    def test_skips_unusable_outputs(self):
        outputs = [
            _output("VGA-1", connected=False),
            _output("DP-2", crtc=0),
            _output("DP-3", crtc=None),
            _output("DP-4", width=0),
            _output("DP-5", height=0),
            _output("DP-6", x=-1920),
            _output("DP-7", y=-1080),
            _output("eDP-1", x=0),
        ]

        monitors = build_monitors(outputs)

        assert [m.name for m in monitors] == ["eDP-1"]

    def test_ties_keep_discovery_order(self):
        outputs = [_output("first", x=0), _output("second", x=0), _output("third", x=0)]

        monitors = build_monitors(outputs)

        assert [m.name for m in monitors] == ["first", "second", "third"]

    def test_empty_raises(self):
        with pytest.raises(NoMonitorsError):
            build_monitors([])

    def test_all_disabled_raises(self):
        with pytest.raises(NoMonitorsError):
            build_monitors([_output("DP-1", connected=False), _output("DP-2", width=0)])


class TestGetMonitors:
    """get_monitors() against a fake RandR backend."""

    @pytest.fixture
    def randr(self, monkeypatch):
        state = {
            "outputs": {
                101: SimpleNamespace(name=b"HDMI-1", connection=xlib.RR_CONNECTED, crtc=7),
                102: SimpleNamespace(name=b"eDP-1", connection=xlib.RR_CONNECTED, crtc=6),
                103: SimpleNamespace(name=b"VGA-1", connection=1, crtc=0),
            },
            "crtcs": {
                6: SimpleNamespace(x=0, y=0, width=1920, height=1080),
                7: SimpleNamespace(x=1920, y=0, width=2560, height=1440),
            },
            "failing_outputs": set(),
            "failing_crtcs": set(),
            "resources_error": None,
        }

        def get_screen_resources(display):
            if state["resources_error"] is not None:
                raise state["resources_error"]
            return SimpleNamespace(outputs=list(state["outputs"]), config_timestamp=1234)

        def get_output_info(display, output, timestamp):
            assert timestamp == 1234
            if output in state["failing_outputs"]:
                raise error.ConnectionClosedError("output")
            return state["outputs"][output]

        def get_crtc_info(display, crtc, timestamp):
            if crtc in state["failing_crtcs"]:
                raise error.ConnectionClosedError("crtc")
            return state["crtcs"][crtc]

        monkeypatch.setattr(xlib, "get_screen_resources", get_screen_resources)
        monkeypatch.setattr(xlib, "get_output_info", get_output_info)
        monkeypatch.setattr(xlib, "get_crtc_info", get_crtc_info)
        return state

    def test_reads_and_sorts(self, randr):
        monitors = get_monitors(object())

        assert monitors == [
            Monitor(width=1920, height=1080, offset_x=0, offset_y=0, name="eDP-1"),
            Monitor(width=2560, height=1440, offset_x=1920, offset_y=0, name="HDMI-1"),
        ]

    def test_failing_output_is_skipped(self, randr):
        randr["failing_outputs"].add(101)

        monitors = get_monitors(object())

        assert [m.name for m in monitors] == ["eDP-1"]

    def test_failing_crtc_is_skipped(self, randr):
        randr["failing_crtcs"].add(6)

        monitors = get_monitors(object())

        assert [m.name for m in monitors] == ["HDMI-1"]

    def test_no_active_outputs(self, randr):
        randr["failing_crtcs"].update({6, 7})

        with pytest.raises(NoMonitorsError):
            get_monitors(object())

    def test_resources_failure(self, randr):
        randr["resources_error"] = error.ConnectionClosedError("display")

        with pytest.raises(MonitorQueryError):
            get_monitors(object())

    def test_missing_extension_propagates(self, randr):
        randr["resources_error"] = MonitorQueryError("X server lacks the RANDR extension")

        with pytest.raises(MonitorQueryError, match="RANDR"):
            get_monitors(object())


class TestScreenResources:
    def test_requires_randr_extension(self):
        display = MagicMock(name="display")
        display.has_extension.return_value = False

        with pytest.raises(MonitorQueryError):
            xlib.get_screen_resources(display)

        display.has_extension.assert_called_once_with("RANDR")
        display.screen.return_value.root.xrandr_get_screen_resources_current.assert_not_called()

    def test_queries_root_when_available(self):
        display = MagicMock(name="display")
        display.has_extension.return_value = True
        root = display.screen.return_value.root

        assert xlib.get_screen_resources(display) is root.xrandr_get_screen_resources_current.return_value
