"""
halfsnap.config.settings - Constantes de configuracion.

No hay archivos de configuracion ni variables de entorno: todo lo
ajustable vive aqui como constante con nombre, y algunas se pueden
sobreescribir desde la linea de comandos (ver halfsnap.__main__).
"""

# Holgura en pixeles para considerar que la ventana ya toca el borde
# del monitor. Absorbe el redondeo de bordes/decoraciones del WM.
EDGE_TOLERANCE: int = 5

# Coordenada y destino: la ventana siempre se coloca arriba del todo.
TARGET_TOP: int = 0

# Codigos de salida del proceso
EXIT_OK: int = 0
EXIT_FAILURE: int = 1

USAGE: str = "Usage: halfsnap left|right [--tolerance PX] [--display NAME] [--dry-run] [-v]"

# Formato de log (igual para todos los handlers)
LOG_FORMAT: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
