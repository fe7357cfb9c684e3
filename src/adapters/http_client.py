"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y cookies para todas las llamadas a nvapi.
- Facilita testeo: se puede inyectar un transport (p.ej. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    cookies: httpx.Cookies | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - Cada llamada obtiene su propio cliente (y su propio cookie jar): no hay
      estado compartido entre llamadas concurrentes.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        cookies=cookies,
        transport=transport,
    )


def build_session_cookies(values: dict[str, str], *, domain: str) -> httpx.Cookies:
    """Cookie jar nuevo con `values` limitado a `domain`."""

    jar = httpx.Cookies()
    for name, value in values.items():
        jar.set(name, value, domain=domain, path="/")
    return jar
