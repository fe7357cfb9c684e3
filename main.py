"""Entry point de desarrollo (sin `pip install -e .`).

Permite ejecutar la CLI desde la raíz del repo:
- `python -m main mylists`
- `python -m main mylist 71381719 --all`

Motivo:
- El código vive en `src/`, así que sin instalación editable Python no
  encuentra `cli`, `core` ni `adapters`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
