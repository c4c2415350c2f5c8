"""halfsnap.config - Constantes de configuracion."""
