"""sigpair-admin: cliente async para el API de administración de un nodo Sigpair."""

from sigpair_admin.client import SigpairAdmin
from sigpair_admin.core.config import DEFAULT_TOKEN_LIFETIME_SECONDS, AdminSettings
from sigpair_admin.core.errors import HttpStatusError, RequestFailed, TransportError

__all__ = [
    "AdminSettings",
    "DEFAULT_TOKEN_LIFETIME_SECONDS",
    "HttpStatusError",
    "RequestFailed",
    "SigpairAdmin",
    "TransportError",
]
