"""Modelos de los endpoints de administración (Pydantic v2).

Por qué Pydantic aquí:
- Los payloads se serializan con los nombres exactos del wire (`user_id`, `lifetime`).
- Las respuestas se validan en modo estricto: un 200 con un body inesperado
  (p.ej. `"user_id": "10"`) no produce un resultado a medias ni convertido.

Nota:
- Estos modelos describen *qué* viaja por el cable, no *cómo* se envía.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CreateUserPayload(BaseModel):
    """Payload de `v1/create-user`."""

    name: str = Field(
        ...,
        description="Nombre del usuario a crear.",
    )


class CreateUserResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    user_id: int = Field(
        ...,
        description="User id del usuario creado.",
    )


class GenUserTokenPayload(BaseModel):
    """Payload de `v1/user-token`.

    El nodo espera `lifetime`; el default (3600) lo aplica el cliente, nunca
    se envía el campo vacío.
    """

    user_id: int = Field(
        ...,
        description="User id del usuario para el que se genera el token.",
    )
    lifetime: int = Field(
        ...,
        description="Vida del token en segundos.",
    )


class GenUserTokenResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    token: str = Field(
        ...,
        description="User token para autenticarse como el usuario y operar en su nombre.",
    )
