"""Exportación JSON de respuestas de nvapi.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Se re-serializa con los nombres del wire (`by_alias=True`), incluidos los
  campos opacos de `Video`, para que el fichero se pueda volver a decodificar.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def export_result_json(*, result: BaseModel, output_path: Path) -> Path:
    """Exporta un envelope (o cualquier modelo) a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = result.model_dump(mode="json", by_alias=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
