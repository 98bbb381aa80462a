"""Contrato del ejecutor de requests.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el adaptador httpx (tests, instrumentación) sin tocar
  `SigpairAdmin`.
"""

from __future__ import annotations

from typing import Protocol, TypedDict, TypeVar, runtime_checkable

from pydantic import BaseModel

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Claves con guion: sintaxis funcional.
AdminHeaders = TypedDict(
    "AdminHeaders",
    {
        "Content-Type": str,
        "Authorization": str,
    },
)


@runtime_checkable
class RequestExecutor(Protocol):
    """Contrato mínimo para ejecutar un POST JSON autenticado.

    Reglas de diseño:
    - Es asíncrono porque hace I/O (HTTP).
    - Un request por llamada: sin reintentos ni caché.
    - Cualquier fallo sale como `core.errors.RequestFailed`.
    """

    async def __call__(
        self,
        url: str,
        headers: AdminHeaders,
        payload: BaseModel,
        response_model: type[ResponseT],
    ) -> ResponseT:
        ...
