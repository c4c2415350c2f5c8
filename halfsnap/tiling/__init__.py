"""
halfsnap.tiling - Geometria y decision del snap.

Este paquete contiene:
    - rect        : Estructura Rect para geometria de areas
    - directional : Direction (LEFT / RIGHT)
    - monitor     : Registro de monitores activos via RandR
    - placement   : Motor de decision (monitor destino y rectangulo)
"""

from halfsnap.tiling.rect import Rect
from halfsnap.tiling.directional import Direction
from halfsnap.tiling.monitor import Monitor, OutputInfo, build_monitors, get_monitors
from halfsnap.tiling.placement import (
    PlacementResult,
    WindowGeometry,
    compute_placement,
    find_monitor_index,
    is_edge_hit,
)

__all__ = [
    "Rect",
    "Direction",
    "Monitor",
    "OutputInfo",
    "build_monitors",
    "get_monitors",
    "PlacementResult",
    "WindowGeometry",
    "compute_placement",
    "find_monitor_index",
    "is_edge_hit",
]
