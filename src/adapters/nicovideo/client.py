"""Cliente de nvapi: mylists del usuario autenticado.

Implementa `core.interfaces.mylist_source.MylistSource` sobre httpx.

Disciplina de decodificación (igual en los dos endpoints):
- Se lee el body completo como texto *antes* de mirar el status, para poder
  decodificar también los bodies de error.
- status > 299 => `NicoErrorEnvelope` => `NicoStatusError`.
- si no => `NicoResult[...]`.
- Sin reintentos: el primer fallo se propaga.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, ValidationError

from adapters.http_client import build_async_client, build_session_cookies
from core.config import AppSettings
from core.domain.models import (
    MylistResponse,
    MylistsResponse,
    NicoErrorEnvelope,
    NicoResult,
    SessionCredential,
)
from core.errors import NicoDecodeError, NicoStatusError, NicoTransportError
from core.interfaces.mylist_source import MylistSource
from core.services.mylist_pipeline import PaginationHooks, fetch_mylist_all

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_MYLISTS_PATH = "/v1/users/me/mylists"


class NicoMylistClient(MylistSource):
    """Lee mylists de nvapi con las cookies de sesión del usuario."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._base_url = self._settings.api_base_url.rstrip("/")
        self._host = urlsplit(self._base_url).hostname or "nvapi.nicovideo.jp"

    async def fetch_mylists(
        self,
        session: SessionCredential,
        sample_item_count: int,
    ) -> NicoResult[MylistsResponse]:
        if sample_item_count < 0:
            raise ValueError("sample_item_count debe ser >= 0")

        return await self._get(
            session,
            _MYLISTS_PATH,
            params={"sampleItemCount": sample_item_count},
            model=NicoResult[MylistsResponse],
        )

    async def fetch_mylist_page(
        self,
        session: SessionCredential,
        mylist_id: int,
        page_size: int,
        page: int,
    ) -> NicoResult[MylistResponse]:
        # page/page_size no se validan aquí: el servidor decide `hasNext`.
        return await self._get(
            session,
            f"{_MYLISTS_PATH}/{mylist_id}",
            params={"pageSize": page_size, "page": page},
            model=NicoResult[MylistResponse],
        )

    async def fetch_mylist_all(
        self,
        session: SessionCredential,
        mylist_id: int,
        *,
        hooks: PaginationHooks | None = None,
    ) -> NicoResult[MylistResponse]:
        """Todas las páginas de una mylist en un único envelope."""

        return await fetch_mylist_all(self, session, mylist_id, hooks=hooks)

    async def _get(
        self,
        session: SessionCredential,
        path: str,
        *,
        params: dict[str, Any],
        model: type[ModelT],
    ) -> ModelT:
        url = f"{self._base_url}{path}"
        cookies = build_session_cookies(session.cookie_values(), domain=self._host)
        headers = {"X-Frontend-Id": self._settings.frontend_id}

        logger.debug("GET %s params=%s", url, params)
        try:
            async with build_async_client(
                self._settings,
                extra_headers=headers,
                cookies=cookies,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
                body = response.text
        except httpx.HTTPError as exc:
            raise NicoTransportError(f"GET {url} falló: {exc}") from exc

        logger.debug("GET %s -> %s (%s bytes)", url, response.status_code, len(body))

        if response.status_code > 299:
            envelope = _decode(NicoErrorEnvelope, body, http_status=response.status_code)
            raise NicoStatusError(envelope, http_status=response.status_code)

        return _decode(model, body, http_status=response.status_code)


def _decode(model: type[ModelT], body: str, *, http_status: int) -> ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        logger.debug("Body no decodificable como %s: %s", model.__name__, body)
        raise NicoDecodeError(
            f"Respuesta inesperada de nvapi (HTTP {http_status}) para {model.__name__}: "
            f"{exc.error_count()} errores",
            body=body,
            http_status=http_status,
        ) from exc
