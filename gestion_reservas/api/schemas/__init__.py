"""Schemas Pydantic de la API (validación de formularios)."""
