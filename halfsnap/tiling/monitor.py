"""
halfsnap.tiling.monitor - Registro de monitores activos.

Usa la extension RandR (via halfsnap.core.xlib) para enumerar las
salidas de video, descarta las que no estan activas y devuelve los
monitores ordenados de izquierda a derecha.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from Xlib.display import Display

from halfsnap.core import xlib
from halfsnap.core.errors import MonitorQueryError, NoMonitorsError
from halfsnap.tiling.rect import Rect

log = logging.getLogger(__name__)


# ============================================================================
# Monitor
# ============================================================================
@dataclass(frozen=True, slots=True)
class Monitor:
    """
    Un monitor activo dentro del escritorio virtual.

    Atributos:
        width:    Ancho en pixeles (> 0).
        height:   Alto en pixeles (> 0).
        offset_x: Posicion x de la esquina superior-izquierda (>= 0).
        offset_y: Posicion y de la esquina superior-izquierda (>= 0).
        name:     Nombre de la salida RandR (ej. "HDMI-1"). Solo informativo.
    """

    width: int
    height: int
    offset_x: int = 0
    offset_y: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Monitor con dimensiones invalidas: {self.width}x{self.height}"
            )
        if self.offset_x < 0 or self.offset_y < 0:
            raise ValueError(
                f"Monitor con offset negativo: +{self.offset_x}+{self.offset_y}"
            )

    @property
    def rect(self) -> Rect:
        """Area completa del monitor."""
        return Rect(self.offset_x, self.offset_y, self.width, self.height)

    @property
    def right(self) -> int:
        return self.offset_x + self.width

    def __str__(self) -> str:
        label = self.name or "monitor"
        return f"{label} {self.width}x{self.height}+{self.offset_x}+{self.offset_y}"


# ============================================================================
# OutputInfo - descriptor crudo de una salida RandR
# ============================================================================
@dataclass(frozen=True, slots=True)
class OutputInfo:
    """
    Datos de una salida tal como los reporta el servidor X.

    Atributos:
        name:      Nombre de la salida.
        connected: True si hay una pantalla conectada.
        crtc:      CRTC asignado (0 o None = sin controlador).
        x, y:      Posicion del CRTC.
        width:     Ancho del CRTC (0 = deshabilitado).
        height:    Alto del CRTC (0 = deshabilitado).
    """

    name: str
    connected: bool
    crtc: Optional[int]
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_usable(self) -> bool:
        return (
            self.connected
            and bool(self.crtc)
            and self.width > 0
            and self.height > 0
            and self.x >= 0
            and self.y >= 0
        )


# ============================================================================
# Construccion del registro
# ============================================================================

def build_monitors(outputs: Iterable[OutputInfo]) -> list[Monitor]:
    """
    Filtra y ordena las salidas para obtener la lista de monitores.

    Se descartan las salidas desconectadas, sin CRTC, con tamano cero
    o con offset negativo.
    El orden es ascendente por offset_x; los empates conservan el
    orden de descubrimiento (sort estable).

    Raises:
        NoMonitorsError: Si no queda ningun monitor.
    """
    monitors: list[Monitor] = []

    for out in outputs:
        if not out.is_usable:
            log.debug(
                "Salida ignorada: %s (conectada=%s, crtc=%s, %dx%d+%d+%d)",
                out.name or "?",
                out.connected,
                out.crtc,
                out.width,
                out.height,
                out.x,
                out.y,
            )
            continue

        monitors.append(
            Monitor(
                width=out.width,
                height=out.height,
                offset_x=out.x,
                offset_y=out.y,
                name=out.name,
            )
        )

    if not monitors:
        raise NoMonitorsError("no se detecto ningun monitor activo")

    monitors.sort(key=lambda m: m.offset_x)

    for i, mon in enumerate(monitors):
        log.debug("Monitor %d: %s", i, mon)
    log.info("Monitores detectados: %d", len(monitors))
    return monitors


def _read_outputs(display: Display) -> list[OutputInfo]:
    """Consulta RandR y convierte cada salida en un OutputInfo."""
    try:
        resources = xlib.get_screen_resources(display)
    except xlib.XLIB_ERRORS as exc:
        raise MonitorQueryError(f"no se pudo consultar RandR: {exc}") from exc

    timestamp = resources.config_timestamp
    outputs: list[OutputInfo] = []

    for output in resources.outputs:
        try:
            info = xlib.get_output_info(display, output, timestamp)
        except xlib.XLIB_ERRORS:
            log.warning("No se pudo obtener info de la salida %s", output)
            continue

        name = xlib.decode_name(info.name)
        connected = info.connection == xlib.RR_CONNECTED

        if not connected or not info.crtc:
            outputs.append(OutputInfo(name=name, connected=connected, crtc=info.crtc))
            continue

        try:
            crtc = xlib.get_crtc_info(display, info.crtc, timestamp)
        except xlib.XLIB_ERRORS:
            log.warning("No se pudo obtener info del CRTC %s (%s)", info.crtc, name)
            continue

        outputs.append(
            OutputInfo(
                name=name,
                connected=connected,
                crtc=info.crtc,
                x=int(crtc.x),
                y=int(crtc.y),
                width=int(crtc.width),
                height=int(crtc.height),
            )
        )

    return outputs


def get_monitors(display: Display) -> list[Monitor]:
    """
    Enumera los monitores activos del servidor X.

    Returns:
        Lista de Monitor ordenada de izquierda a derecha.

    Raises:
        MonitorQueryError: Si RandR no responde.
        NoMonitorsError:   Si no hay ningun monitor activo.
    """
    return build_monitors(_read_outputs(display))
