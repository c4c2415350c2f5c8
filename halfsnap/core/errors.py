"""
halfsnap.core.errors - Exception hierarchy.

Every failure of the X11 collaborators is mapped onto one of these so
that the entry point can tell fatal errors from the best-effort ones.
"""

from __future__ import annotations


class HalfSnapError(Exception):
    """Base class for all halfsnap errors."""


class DisplayConnectionError(HalfSnapError):
    """The X server could not be reached."""


class NoActiveWindowError(HalfSnapError):
    """_NET_ACTIVE_WINDOW is missing or points at no window."""


class GeometryQueryError(HalfSnapError):
    """The geometry of the active window could not be read."""


class NoMonitorsError(HalfSnapError):
    """No usable monitor was found."""


class MonitorQueryError(NoMonitorsError):
    """RandR screen resources could not be queried at all."""


class ProtocolError(HalfSnapError):
    """An X request that mutates window state failed."""
