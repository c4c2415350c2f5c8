"""
halfsnap.tiling.rect - Estructura geometrica Rect.

Define un rectangulo inmutable que representa un area de pantalla.
Se usa para describir tanto el area de cada monitor como el
rectangulo destino de la ventana al hacer snap.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Todas las coordenadas estan en pixeles del escritorio virtual X11.
    El origen (0, 0) es la esquina superior-izquierda de la pantalla raiz.

    Atributos:
        x: Coordenada horizontal de la esquina superior-izquierda.
        y: Coordenada vertical de la esquina superior-izquierda.
        w: Ancho en pixeles.
        h: Alto en pixeles.
    """

    x: int
    y: int
    w: int
    h: int

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.w

    # ------------------------------------------------------------------
    # Operaciones geometricas
    # ------------------------------------------------------------------
    def contains_x(self, px: int) -> bool:
        """True si *px* cae dentro del intervalo horizontal [left, right)."""
        return self.left <= px < self.right

    def left_half(self, top: int | None = None) -> Rect:
        """
        Mitad izquierda del rectangulo, a todo su alto.

        El ancho es ``w // 2``: con anchos impares queda 1px libre
        a la derecha de la mitad.

        Args:
            top: Coordenada y del resultado. Por defecto ``self.y``.
        """
        y = self.y if top is None else top
        return Rect(self.x, y, self.w // 2, self.h)

    def right_half(self, top: int | None = None) -> Rect:
        """
        Mitad derecha del rectangulo, pegada al borde derecho.

        Args:
            top: Coordenada y del resultado. Por defecto ``self.y``.
        """
        half = self.w // 2
        y = self.y if top is None else top
        return Rect(self.right - half, y, half, self.h)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Rect({self.w}x{self.h}+{self.x}+{self.y})"
