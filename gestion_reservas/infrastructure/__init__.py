"""
Capa de Infraestructura - Gestión de Reservas.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tablas, motor async, repositorios SQL, transacciones y reintentos
"""
