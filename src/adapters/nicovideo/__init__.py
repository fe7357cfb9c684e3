"""Adaptadores de niconico (nvapi).

Por qué un paquete:
- Agrupa todo lo que habla HTTP con `nvapi.nicovideo.jp`.
- `NicoMylistClient` implementa `core.interfaces.mylist_source.MylistSource`.
"""

from adapters.nicovideo.client import NicoMylistClient

__all__ = [
    "NicoMylistClient",
]
