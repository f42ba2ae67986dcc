"""Adaptadores de base de datos: tablas, motor async, repositorios y transacciones."""
