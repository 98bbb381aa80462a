"""Core del cliente: configuración, modelos del wire, errores y contratos.

Por qué:
- Nada aquí hace I/O; los adaptadores concretos viven en `sigpair_admin.adapters`.
"""
