"""
HalfSnap - snap the focused X11 window to half a monitor.

Subpackages:
    - tiling : Geometry, monitor registry and the placement engine
    - core   : X11 collaborators (display, active window, mutations)
    - config : Named configuration constants
"""

__version__ = "0.1.0"
