"""Errores de la API de mylists.

Por qué una jerarquía propia:
- La CLI (y cualquier otro entry-point) captura `NicoApiError` en el borde sin
  conocer httpx ni pydantic.
- Cada tipo conserva el contexto útil para diagnosticar (envelope, body crudo).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.domain.models import NicoErrorEnvelope


class NicoApiError(Exception):
    pass


class NicoTransportError(NicoApiError):
    """Fallo de red/conexión o request mal construido (no se reintenta)."""


class NicoStatusError(NicoApiError):
    """La API respondió con status > 299."""

    def __init__(self, envelope: NicoErrorEnvelope, *, http_status: int | None = None) -> None:
        self.envelope = envelope
        self.http_status = http_status if http_status is not None else envelope.meta.status
        message = f"nvapi respondió {self.status}"
        if self.error_code:
            message += f" ({self.error_code})"
        super().__init__(message)

    @property
    def status(self) -> int:
        return self.envelope.meta.status

    @property
    def error_code(self) -> str | None:
        return self.envelope.meta.error_code


class NicoDecodeError(NicoApiError):
    """El body no encaja con la forma esperada (posible cambio de la API)."""

    def __init__(self, message: str, *, body: str | None, http_status: int | None = None) -> None:
        super().__init__(message)
        self.body = body
        self.http_status = http_status
