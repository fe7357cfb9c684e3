"""Contratos de fuentes de mylists.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La agregación de páginas (`core.services.mylist_pipeline`) depende solo de
  este contrato, así se testea con un stub sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import MylistResponse, MylistsResponse, NicoResult, SessionCredential


@runtime_checkable
class MylistSource(Protocol):
    """Contrato mínimo para leer mylists.

    Reglas de diseño:
    - Los métodos son asíncronos porque hacen I/O (HTTP).
    - Cada llamada es independiente: nada de estado compartido entre llamadas.
    - Los errores se propagan como `core.errors.NicoApiError`.
    """

    async def fetch_mylists(
        self,
        session: SessionCredential,
        sample_item_count: int,
    ) -> NicoResult[MylistsResponse]:
        """Lista las mylists del usuario autenticado."""

        ...

    async def fetch_mylist_page(
        self,
        session: SessionCredential,
        mylist_id: int,
        page_size: int,
        page: int,
    ) -> NicoResult[MylistResponse]:
        """Devuelve una página (1-based) de una mylist."""

        ...
