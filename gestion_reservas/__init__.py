"""Gestión de reservas de alquiler vacacional: clientes, propiedades, reservas, pagos y valoraciones."""
