"""
halfsnap.tiling.placement - Motor de decision del snap.

Dado el rectangulo horizontal de la ventana activa, la lista de
monitores ordenada de izquierda a derecha y la direccion pedida,
decide en que monitor termina la ventana y en que mitad.

El algoritmo:
    1. Pertenencia: el monitor que contiene el centro horizontal de la
       ventana.  Si ninguno lo contiene se usa el primero (indice 0).
    2. Borde: si la ventana ya toca el borde del monitor en la
       direccion pedida (con EDGE_TOLERANCE de holgura), salta al
       monitor vecino.
    3. Limites: si no hay vecino en esa direccion se queda en el
       monitor del extremo y no salta.
    4. Destino: media pantalla (ancho // 2) a todo el alto del monitor.
       Al saltar, la ventana entra por el lado mas cercano al monitor
       de origen.

Es una funcion total: nunca falla con una lista de monitores no vacia.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from halfsnap.config.settings import EDGE_TOLERANCE, TARGET_TOP
from halfsnap.tiling.directional import Direction
from halfsnap.tiling.monitor import Monitor
from halfsnap.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Entrada / salida
# ============================================================================
@dataclass(frozen=True, slots=True)
class WindowGeometry:
    """
    Instantanea de la posicion de la ventana activa.

    Solo x y width participan en la decision; y y height se guardan
    para el log.
    """

    x: int
    width: int
    y: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def center_x(self) -> int:
        return self.x + self.width // 2

    def __str__(self) -> str:
        return f"{self.width}x{self.height}+{self.x}+{self.y}"


@dataclass(frozen=True, slots=True)
class PlacementResult:
    """
    Rectangulo destino de la ventana.

    Atributos:
        target_x:       Posicion x destino.
        target_y:       Siempre TARGET_TOP.
        target_width:   Mitad del ancho del monitor destino.
        target_height:  Alto completo del monitor destino.
        monitor_index:  Indice del monitor destino.
        moved_to_other: True si la ventana salto a un monitor vecino.
    """

    target_x: int
    target_y: int
    target_width: int
    target_height: int
    monitor_index: int = 0
    moved_to_other: bool = False

    def as_rect(self) -> Rect:
        return Rect(self.target_x, self.target_y, self.target_width, self.target_height)


# ============================================================================
# Pasos del algoritmo
# ============================================================================

def find_monitor_index(monitors: Sequence[Monitor], window: WindowGeometry) -> int:
    """
    Indice del monitor que contiene el centro horizontal de la ventana.

    Returns:
        El primer indice cuyo intervalo [offset_x, offset_x + width)
        contiene el centro, o 0 si ninguno lo contiene.
    """
    center = window.center_x
    for i, mon in enumerate(monitors):
        if mon.rect.contains_x(center):
            return i

    log.debug("Centro x=%d fuera de todos los monitores, usando el 0", center)
    return 0


def is_edge_hit(
    monitor: Monitor,
    window: WindowGeometry,
    direction: Direction,
    tolerance: int = EDGE_TOLERANCE,
) -> bool:
    """True si la ventana ya toca el borde de *monitor* hacia *direction*."""
    if direction == Direction.LEFT:
        return window.x <= monitor.offset_x + tolerance
    return window.right >= monitor.right - tolerance


def compute_placement(
    monitors: Sequence[Monitor],
    window: WindowGeometry,
    direction: Direction,
    tolerance: int = EDGE_TOLERANCE,
) -> PlacementResult:
    """
    Calcula el rectangulo destino del snap.

    Args:
        monitors:  Monitores ordenados por offset_x (no vacia).
        window:    Geometria actual de la ventana.
        direction: Direccion pedida.
        tolerance: Holgura en pixeles para detectar el borde.

    Returns:
        PlacementResult con el rectangulo y el monitor destino.

    Raises:
        ValueError: Si *monitors* esta vacia.
    """
    if not monitors:
        raise ValueError("compute_placement requiere al menos un monitor")

    current = find_monitor_index(monitors, window)
    index = current
    moved = False

    if is_edge_hit(monitors[current], window, direction, tolerance):
        index += -1 if direction == Direction.LEFT else 1
        moved = True

    # Sin vecino: quedarse en el monitor del extremo
    if index < 0:
        index = 0
        moved = False
    elif index >= len(monitors):
        index = len(monitors) - 1
        moved = False

    mon = monitors[index]

    # Al saltar a la izquierda la ventana entra por la derecha del
    # monitor nuevo, y viceversa.
    if moved:
        to_right_half = direction == Direction.LEFT
    else:
        to_right_half = direction == Direction.RIGHT

    if to_right_half:
        target = mon.rect.right_half(top=TARGET_TOP)
    else:
        target = mon.rect.left_half(top=TARGET_TOP)

    log.info(
        "snap %s: ventana %s en monitor %d -> monitor %d (%s) %s",
        direction.value,
        window,
        current,
        index,
        "salto" if moved else "mismo monitor",
        target,
    )

    return PlacementResult(
        target_x=target.x,
        target_y=target.y,
        target_width=target.w,
        target_height=target.h,
        monitor_index=index,
        moved_to_other=moved,
    )
