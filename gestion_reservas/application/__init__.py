"""Capa de aplicación: puertos, resultados y casos de uso."""
