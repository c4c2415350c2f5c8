"""
halfsnap.core.manager - One snap transaction.

Each run is a single linear sequence against an already open display:

    locate window -> read geometry -> enumerate monitors
        -> compute placement -> clear maximized (best effort) -> apply

Nothing is kept between runs.
"""

from __future__ import annotations

import logging

from Xlib.display import Display

from halfsnap.config.settings import EDGE_TOLERANCE
from halfsnap.core.errors import ProtocolError
from halfsnap.core.window import locate_active_window
from halfsnap.tiling.directional import Direction
from halfsnap.tiling.monitor import get_monitors
from halfsnap.tiling.placement import PlacementResult, compute_placement

log = logging.getLogger(__name__)


def snap_active_window(
    display: Display,
    direction: Direction,
    tolerance: int = EDGE_TOLERANCE,
    dry_run: bool = False,
) -> PlacementResult:
    """
    Snap the active window to one half of its monitor, or hop it to the
    neighbouring monitor if it already touches that edge.

    Args:
        display:   Open X display (see halfsnap.core.xlib.open_display).
        direction: Requested snap direction.
        tolerance: Edge slack in pixels.
        dry_run:   Compute the placement but leave the window alone.

    Returns:
        The computed PlacementResult.

    Raises:
        NoActiveWindowError, GeometryQueryError, NoMonitorsError:
            The input state could not be established.
        ProtocolError: The final move/resize failed.
    """
    window = locate_active_window(display)
    geometry = window.geometry()
    monitors = get_monitors(display)

    result = compute_placement(monitors, geometry, direction, tolerance)

    if dry_run:
        log.info("Dry run, %r left untouched", window)
        return result

    try:
        window.clear_maximized()
    except ProtocolError as exc:
        log.warning("Could not clear maximized state: %s", exc)

    window.move_resize(result.as_rect())
    return result
