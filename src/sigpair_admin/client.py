"""Cliente para los endpoints de administración de un nodo Sigpair.

Dos operaciones:
- `create_user`: alta de usuario (`v1/create-user`).
- `gen_user_token`: user token con vida limitada (`v1/user-token`).

Cada llamada es un único POST independiente; el cliente no guarda sesión.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from sigpair_admin.adapters.http_client import build_admin_headers, execute_request
from sigpair_admin.core.config import DEFAULT_TOKEN_LIFETIME_SECONDS, AdminSettings
from sigpair_admin.core.domain.models import (
    CreateUserPayload,
    CreateUserResponse,
    GenUserTokenPayload,
    GenUserTokenResponse,
)
from sigpair_admin.core.errors import RequestFailed
from sigpair_admin.core.interfaces.executor import RequestExecutor, ResponseT

logger = logging.getLogger(__name__)

CREATE_USER_ROUTE = "v1/create-user"
USER_TOKEN_ROUTE = "v1/user-token"


class SigpairAdmin:
    """Cliente async del API de administración de un nodo Sigpair.

    `base_url` y `admin_token` no cambian tras construir el cliente, así que
    una instancia se puede compartir entre tareas concurrentes.
    """

    def __init__(
        self,
        base_url: str,
        admin_token: str,
        *,
        settings: AdminSettings | None = None,
        executor: RequestExecutor | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._admin_token = admin_token
        self._settings = settings or AdminSettings()
        self._executor: RequestExecutor = executor or functools.partial(
            execute_request,
            settings=self._settings,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: AdminSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "SigpairAdmin":
        """Construye el cliente desde `SIGPAIR_BASE_URL` / `SIGPAIR_ADMIN_TOKEN`."""

        settings = settings or AdminSettings()
        if not settings.base_url:
            raise ValueError("SIGPAIR_BASE_URL is not configured")
        if not settings.admin_token:
            raise ValueError("SIGPAIR_ADMIN_TOKEN is not configured")
        return cls(
            settings.base_url,
            settings.admin_token,
            settings=settings,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def admin_token(self) -> str:
        return self._admin_token

    def __repr__(self) -> str:
        return f"SigpairAdmin(base_url={self._base_url!r})"

    async def create_user(self, name: str) -> int:
        """Da de alta un usuario en el nodo.

        Devuelve el `user_id` asignado por el nodo.
        """

        response = await self._post(
            CREATE_USER_ROUTE,
            CreateUserPayload,
            CreateUserResponse,
            name=name,
        )
        return response.user_id

    async def gen_user_token(self, user_id: int, lifetime: int | None = None) -> str:
        """Pide al nodo un user token para `user_id`.

        `lifetime` is in seconds; when omitted the client sends
        `default_token_lifetime_seconds` (3600 unless configured otherwise).
        """

        if lifetime is None:
            lifetime = self._settings.default_token_lifetime_seconds
        response = await self._post(
            USER_TOKEN_ROUTE,
            GenUserTokenPayload,
            GenUserTokenResponse,
            user_id=user_id,
            lifetime=lifetime,
        )
        return response.token

    async def _post(
        self,
        route: str,
        payload_model: type[BaseModel],
        response_model: type[ResponseT],
        **fields: Any,
    ) -> ResponseT:
        url = f"{self._base_url}/{route}"
        headers = build_admin_headers(self._admin_token)

        logger.debug("POST %s", url)
        try:
            payload = _build_payload(payload_model, fields)
            return await self._executor(url, headers, payload, response_model)
        except RequestFailed as exc:
            logger.warning("Sigpair admin call %s failed: %s", route, exc.message)
            raise


def _build_payload(payload_model: type[BaseModel], fields: dict[str, Any]) -> BaseModel:
    # Argumentos inválidos fallan igual que el resto: sin request y con RequestFailed.
    try:
        return payload_model(**fields)
    except ValidationError as exc:
        raise RequestFailed(f"Failed to make request, error:{exc}") from exc


__all__ = [
    "CREATE_USER_ROUTE",
    "DEFAULT_TOKEN_LIFETIME_SECONDS",
    "SigpairAdmin",
    "USER_TOKEN_ROUTE",
]
