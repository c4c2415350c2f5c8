"""
halfsnap.tiling.directional - Direccion del snap.

Solo existen dos direcciones: la herramienta no hace snap vertical.
"""

from __future__ import annotations

import enum
import logging
from typing import Optional

log = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Horizontal directions for snap operations."""
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional[Direction]:
        """
        Convierte el argumento de linea de comandos en una Direction.

        Returns:
            La Direction correspondiente, o None si *value* no es
            exactamente "left" ni "right".
        """
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            log.debug("Direccion invalida: %r", value)
            return None
