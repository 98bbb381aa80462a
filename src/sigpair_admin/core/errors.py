"""Errores del cliente.

Por qué una sola raíz:
- Quien llama captura `RequestFailed` y cubre cualquier fallo (red, HTTP, decode).
- Las subclases exponen la causa de forma estructurada sin romper ese contrato.
"""

from __future__ import annotations


class RequestFailed(Exception):
    """Fallo normalizado de una llamada al nodo."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class HttpStatusError(RequestFailed):
    """El nodo respondió con un status distinto de 200."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to make request, error:{reason}, code: {status_code}")


class TransportError(RequestFailed):
    """No hubo respuesta (DNS, conexión rechazada, timeout, TLS)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to make request, error:{detail}")


__all__ = ["HttpStatusError", "RequestFailed", "TransportError"]
