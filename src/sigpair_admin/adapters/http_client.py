"""Wrapper de httpx para el API de administración.

Por qué un wrapper:
- Estandariza timeouts, headers y la normalización de errores.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel

from sigpair_admin.core.config import AdminSettings
from sigpair_admin.core.errors import HttpStatusError, RequestFailed, TransportError
from sigpair_admin.core.interfaces.executor import AdminHeaders, ResponseT


def build_async_client(
    settings: AdminSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeout/headers para que todas las llamadas se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AdminSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


def build_admin_headers(admin_token: str) -> AdminHeaders:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {admin_token}",
    }


async def execute_request(
    url: str,
    headers: AdminHeaders,
    payload: BaseModel,
    response_model: type[ResponseT],
    *,
    settings: AdminSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseT:
    """Ejecuta un POST JSON y devuelve el body validado.

    Reglas:
    - Un único request; el cliente httpx se abre y se cierra aquí.
    - Fallo de red -> `TransportError` (con el texto del error original).
    - Status != 200 -> `HttpStatusError` (status + reason; el body no se lee).
    - Body que no decodifica o no encaja en `response_model` -> `RequestFailed`.
    """

    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.post(
                url,
                json=payload.model_dump(mode="json"),
                headers=dict(headers),
            )
    except httpx.HTTPError as exc:
        raise TransportError(str(exc)) from exc
    except Exception as exc:
        raise RequestFailed(f"Failed to make request, error:{exc}") from exc

    if response.status_code != 200:
        raise HttpStatusError(response.status_code, response.reason_phrase)

    try:
        return response_model.model_validate(response.json())
    except Exception as exc:
        raise RequestFailed(f"Failed to make request, error:{exc}") from exc
