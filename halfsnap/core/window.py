"""
halfsnap.core.window - The Window handle for the active window.

A Window wraps the X resource of the currently active window.  It is
created once per run by locate_active_window() and exposes the three
operations the snap transaction needs: read geometry, clear the
maximized state and move/resize.
"""

from __future__ import annotations

import logging
from typing import Any

from Xlib.display import Display

from halfsnap.core import xlib
from halfsnap.core.errors import (
    GeometryQueryError,
    NoActiveWindowError,
    ProtocolError,
)
from halfsnap.tiling.placement import WindowGeometry
from halfsnap.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Window
# ============================================================================
class Window:
    """
    Live handle to an X11 top-level window.

    Equality and hashing are based solely on the window id.
    """

    __slots__ = ("_display", "_xwin", "_wid")

    def __init__(self, display: Display, window_id: int) -> None:
        self._display = display
        self._wid = window_id
        self._xwin: Any = xlib.window_from_id(display, window_id)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------
    @property
    def wid(self) -> int:
        return self._wid

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def geometry(self) -> WindowGeometry:
        """
        Query the current geometry of the window.

        Raises:
            GeometryQueryError: If the server rejects the request
                (usually because the window vanished).
        """
        try:
            geom = xlib.get_geometry(self._xwin)
        except xlib.XLIB_ERRORS as exc:
            raise GeometryQueryError(
                f"cannot read geometry of window {self._wid:#x}: {exc}"
            ) from exc

        snapshot = WindowGeometry(
            x=int(geom.x),
            width=int(geom.width),
            y=int(geom.y),
            height=int(geom.height),
        )
        log.debug("Window %#x geometry: %s", self._wid, snapshot)
        return snapshot

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def clear_maximized(self) -> None:
        """
        Ask the window manager to drop both maximized flags.

        A maximized window ignores ConfigureWindow on most window
        managers, so this must run before move_resize().

        Raises:
            ProtocolError: If either client message fails.
        """
        for state in ("_NET_WM_STATE_MAXIMIZED_VERT", "_NET_WM_STATE_MAXIMIZED_HORZ"):
            try:
                xlib.send_wm_state(
                    self._display,
                    self._xwin,
                    xlib.NET_WM_STATE_REMOVE,
                    xlib.intern_atom(self._display, state),
                )
            except xlib.XLIB_ERRORS as exc:
                raise ProtocolError(f"cannot remove {state}: {exc}") from exc

    def move_resize(self, rect: Rect) -> None:
        """
        Reposition and resize the window.

        Raises:
            ProtocolError: If the ConfigureWindow request fails.
        """
        try:
            xlib.configure_window(
                self._display, self._xwin, rect.x, rect.y, rect.w, rect.h,
            )
        except xlib.XLIB_ERRORS as exc:
            raise ProtocolError(
                f"cannot move/resize window {self._wid:#x} to {rect}: {exc}"
            ) from exc
        log.info("Window %#x moved to %s", self._wid, rect)

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Window):
            return self._wid == other._wid
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._wid)

    def __repr__(self) -> str:
        return f"Window(wid={self._wid:#x})"


# ============================================================================
# Locator
# ============================================================================

def locate_active_window(display: Display) -> Window:
    """
    Resolve the window named by _NET_ACTIVE_WINDOW.

    Raises:
        NoActiveWindowError: If there is no active window, or the
            property cannot be read.
    """
    try:
        wid = xlib.get_active_window_id(display)
    except xlib.XLIB_ERRORS as exc:
        raise NoActiveWindowError(f"cannot read _NET_ACTIVE_WINDOW: {exc}") from exc

    if wid == 0:
        raise NoActiveWindowError("no active window")

    log.debug("Active window: %#x", wid)
    return Window(display, wid)
