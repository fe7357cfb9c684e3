"""Modelos del dominio (Pydantic v2) para la API de mylists de niconico.

Por qué Pydantic en el dominio:
- Nos da validación estricta en el borde (JSON de nvapi) sin acoplar el Core
  a httpx ni a la CLI.
- Los alias camelCase quedan declarados una sola vez; el resto del código
  trabaja con atributos snake_case.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
- Son inmutables (`frozen=True`): la única "mutación" (agregar páginas en
  `fetch_mylist_all`) se hace con `model_copy(update=...)`.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, SecretStr
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from core.errors import NicoDecodeError

T = TypeVar("T")


class NicoModel(BaseModel):
    """Base común: wire camelCase, atributos snake_case, inmutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class NicoMeta(NicoModel):
    status: int = Field(..., description="Status HTTP reportado por la API.")
    error_code: str | None = Field(
        default=None,
        description="Código de error de nvapi (p.ej. 'NOT_FOUND').",
    )


class NicoResult(NicoModel, Generic[T]):
    """Envelope `{meta, data}` de toda respuesta exitosa.

    `data` es opcional: la API a veces omite (o manda `null`) el payload. Los
    consumidores deben tratar el caso vacío de forma explícita.
    """

    meta: NicoMeta
    data: T | None = None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    def require_data(self) -> T:
        """Devuelve el payload o lanza `NicoDecodeError` si no vino."""

        if self.data is None:
            raise NicoDecodeError(
                f"Envelope sin 'data' (status={self.meta.status})",
                body=None,
            )
        return self.data


class NicoErrorEnvelope(NicoModel):
    """Respuesta de error: solo `meta`, sin payload."""

    meta: NicoMeta


class Owner(NicoModel):
    """Dueño de una mylist o de un video (usuario, canal o anonimizado)."""

    owner_type: str
    id: str | None = None
    name: str | None = None
    icon_url: str | None = None


class Count(NicoModel):
    view: int = Field(..., ge=0)
    comment: int = Field(..., ge=0)
    mylist: int = Field(..., ge=0)
    like: int = Field(..., ge=0)


class Thumbnail(NicoModel):
    url: str
    middle_url: str | None = None
    large_url: str | None = None
    listing_url: str | None = None
    n_hd_url: str | None = None


class Video(NicoModel):
    """Video embebido en un item de mylist.

    `n_9d091f87` y `n_acf68865` son flags opacos: la API los nombra con un
    hash y no hay documentación pública de su significado. Se conservan tal
    cual para no perderlos al re-serializar.
    """

    video_type: str = Field(..., alias="type")
    id: str
    title: str
    registered_at: str
    count: Count
    thumbnail: Thumbnail
    duration: int = Field(..., ge=0, description="Duración en segundos.")
    short_description: str
    latest_comment_summary: str
    is_channel_video: bool
    is_payment_required: bool
    playback_position: float | None = None
    owner: Owner
    require_sensitive_masking: bool
    video_live: str | None = None
    n_9d091f87: bool = Field(..., alias="9d091f87")
    n_acf68865: bool = Field(..., alias="acf68865")


class Item(NicoModel):
    item_id: int = Field(..., ge=0)
    watch_id: str
    description: str
    added_at: str
    status: str
    video: Video


class Mylist(NicoModel):
    """Resumen de una mylist tal como aparece en el listado del usuario."""

    id: int = Field(..., ge=0)
    is_public: bool
    name: str
    description: str
    default_sort_key: str
    default_sort_order: str
    items_count: int = Field(..., ge=0)
    owner: Owner
    sample_items: list[Item] = Field(default_factory=list)
    follower_count: int = Field(..., ge=0)
    created_at: str
    is_following: bool


class MylistsResponse(NicoModel):
    mylists: list[Mylist] = Field(default_factory=list)


class MylistDetail(NicoModel):
    """Una página de una mylist: items + flags de paginación."""

    id: int = Field(..., ge=0)
    name: str
    description: str
    default_sort_key: str
    default_sort_order: str
    items: list[Item] = Field(default_factory=list)
    total_item_count: int = Field(..., ge=0)
    has_next: bool
    is_public: bool
    owner: Owner
    has_invisible_items: bool
    follower_count: int = Field(..., ge=0)
    is_following: bool


class MylistResponse(NicoModel):
    mylist: MylistDetail


class SessionCredential(BaseModel):
    """Par de cookies que identifican una sesión autenticada de niconico.

    Por qué SecretStr:
    - Evita que los tokens acaben en logs, tracebacks o `repr()`.
    """

    model_config = ConfigDict(frozen=True)

    user_session: SecretStr = Field(
        ...,
        description="Valor de la cookie `user_session`.",
    )
    user_session_secure: SecretStr = Field(
        ...,
        description="Valor de la cookie `user_session_secure`.",
    )

    @classmethod
    def from_values(cls, user_session: str, user_session_secure: str) -> "SessionCredential":
        if not user_session or not user_session_secure:
            raise ValueError("user_session y user_session_secure son obligatorios")
        return cls(
            user_session=SecretStr(user_session),
            user_session_secure=SecretStr(user_session_secure),
        )

    def cookie_values(self) -> dict[str, str]:
        """Valores en claro, solo para construir el cookie jar."""

        return {
            "user_session": self.user_session.get_secret_value(),
            "user_session_secure": self.user_session_secure.get_secret_value(),
        }
