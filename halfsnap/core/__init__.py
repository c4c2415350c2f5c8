"""
halfsnap.core - X11 collaborators of the snap engine.

This package contains:
    - xlib    : Low-level python-xlib calls and the scoped display connection
    - window  : The Window handle and the active window locator
    - errors  : Exception hierarchy
    - manager : snap_active_window() - one full snap transaction

Only the errors are re-exported here; window and manager depend on
halfsnap.tiling, which itself imports halfsnap.core.xlib.
"""

from halfsnap.core.errors import (
    HalfSnapError,
    DisplayConnectionError,
    NoActiveWindowError,
    GeometryQueryError,
    NoMonitorsError,
    MonitorQueryError,
    ProtocolError,
)

__all__ = [
    "HalfSnapError",
    "DisplayConnectionError",
    "NoActiveWindowError",
    "GeometryQueryError",
    "NoMonitorsError",
    "MonitorQueryError",
    "ProtocolError",
]
