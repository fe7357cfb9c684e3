"""Configuración de logging.

Por qué aquí:
- Un único punto que decide handlers/niveles; los módulos solo hacen
  `logging.getLogger(__name__)`.
- La consola usa Rich para no mezclar estilos con la salida de la CLI.
"""

from __future__ import annotations

import logging
import logging.handlers

from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(settings: AppSettings | None = None, *, level: str | None = None) -> None:
    """Configura el logging raíz según `settings`.

    - `log_level`: nivel (se puede forzar con `level`, p.ej. `--verbose`)
    - `log_file`: si se define, añade un RotatingFileHandler
    """

    settings = settings or AppSettings()
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.WARNING)
    root = logging.getLogger()
    root.setLevel(resolved)
    # Evita handlers duplicados si se llama varias veces.
    if root.handlers:
        return

    console = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console.setLevel(resolved)
    root.addHandler(console)

    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            settings.log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(resolved)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    # httpx loguea cada request en INFO (con la URL completa).
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
