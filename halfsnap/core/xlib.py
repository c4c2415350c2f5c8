"""
halfsnap.core.xlib - Low-level X11 bindings via python-xlib.

Centralizes all X protocol calls used by halfsnap so that no other
module needs to import Xlib directly.  Requests whose failure matters
are sent with an error catcher and followed by a round trip, so X
errors are raised here instead of being printed by the default
asynchronous error handler.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from typing import Any, Optional

from Xlib import X, Xatom, error
from Xlib.display import Display
from Xlib.ext import randr
from Xlib.protocol import event

from halfsnap.core.errors import DisplayConnectionError, MonitorQueryError

log = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

# _NET_WM_STATE actions (EWMH)
NET_WM_STATE_REMOVE = 0

# Source indication: 1 = normal application
SOURCE_APPLICATION = 1

# RandR output connection state
RR_CONNECTED = randr.Connected

# Extension name as announced by the server
RANDR_EXTENSION = randr.extname

# Event mask for client messages addressed to the window manager
WM_MESSAGE_MASK = X.SubstructureRedirectMask | X.SubstructureNotifyMask

# Exceptions that mean "the request failed"
XLIB_ERRORS = (error.XError, error.ConnectionClosedError)


# ============================================================================
# Connection
# ============================================================================

@contextlib.contextmanager
def open_display(name: Optional[str] = None) -> Iterator[Display]:
    """
    Open a connection to the X server and close it on exit.

    Args:
        name: Display name (e.g. ":0").  None uses $DISPLAY.

    Raises:
        DisplayConnectionError: If the connection cannot be established.
    """
    try:
        display = Display(name)
    except (error.DisplayError, error.ConnectionClosedError, OSError) as exc:
        raise DisplayConnectionError(f"cannot connect to X display: {exc}") from exc

    log.debug("Connected to X display %s", display.get_display_name())
    try:
        yield display
    finally:
        display.close()
        log.debug("X display closed")


def get_root(display: Display) -> Any:
    """Root window of the default screen."""
    return display.screen().root


# ============================================================================
# Checked requests
# ============================================================================

def _raise_caught(display: Display, catcher: error.CatchError) -> None:
    """Round trip to the server and re-raise any error the catcher saw."""
    display.sync()
    err = catcher.get_error()
    if err is not None:
        raise err


# ============================================================================
# Properties
# ============================================================================

def intern_atom(display: Display, name: str) -> int:
    return display.intern_atom(name)


def get_active_window_id(display: Display) -> int:
    """
    Read _NET_ACTIVE_WINDOW from the root window.

    Returns:
        The window id, or 0 if the property is missing or empty.
    """
    root = get_root(display)
    atom = display.intern_atom("_NET_ACTIVE_WINDOW", True)
    if atom == X.NONE:
        return 0

    prop = root.get_full_property(atom, Xatom.WINDOW)
    if prop is None or len(prop.value) == 0:
        return 0
    return int(prop.value[0])


def window_from_id(display: Display, window_id: int) -> Any:
    return display.create_resource_object("window", window_id)


def get_geometry(window: Any) -> Any:
    """GetGeometry reply (x, y, width, height, border_width)."""
    return window.get_geometry()


# ============================================================================
# Window mutation
# ============================================================================

def send_wm_state(
    display: Display,
    window: Any,
    action: int,
    first: int,
    second: int = 0,
) -> None:
    """
    Send a _NET_WM_STATE client message to the window manager.

    Args:
        action: NET_WM_STATE_REMOVE (0) or add (1).
        first:  First property atom to change.
        second: Optional second property atom (0 = none).
    """
    root = get_root(display)
    msg = event.ClientMessage(
        window=window,
        client_type=display.intern_atom("_NET_WM_STATE"),
        data=(32, [action, first, second, SOURCE_APPLICATION, 0]),
    )
    catcher = error.CatchError()
    root.send_event(msg, event_mask=WM_MESSAGE_MASK, onerror=catcher)
    _raise_caught(display, catcher)


def configure_window(
    display: Display,
    window: Any,
    x: int,
    y: int,
    width: int,
    height: int,
) -> None:
    """Move and resize *window* in a single ConfigureWindow request."""
    catcher = error.CatchError()
    window.configure(x=x, y=y, width=width, height=height, onerror=catcher)
    _raise_caught(display, catcher)


# ============================================================================
# RandR
# ============================================================================

def get_screen_resources(display: Display) -> Any:
    """
    GetScreenResourcesCurrent reply for the root window.

    Raises:
        MonitorQueryError: If the server does not announce RandR
            (python-xlib then never registers the xrandr_* methods).
    """
    if not display.has_extension(RANDR_EXTENSION):
        raise MonitorQueryError(f"X server lacks the {RANDR_EXTENSION} extension")
    return get_root(display).xrandr_get_screen_resources_current()


def get_output_info(display: Display, output: int, timestamp: int) -> Any:
    return display.xrandr_get_output_info(output, timestamp)


def get_crtc_info(display: Display, crtc: int, timestamp: int) -> Any:
    return display.xrandr_get_crtc_info(crtc, timestamp)


def decode_name(name: Any) -> str:
    """RandR output names arrive as bytes or str depending on the Xlib version."""
    if isinstance(name, bytes):
        return name.decode("utf-8", errors="replace")
    return str(name)
