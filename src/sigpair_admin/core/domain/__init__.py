"""Modelos de los payloads y respuestas del API de administración."""
