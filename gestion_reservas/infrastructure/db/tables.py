from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    func,
)

metadata = MetaData()

# La unicidad del email se comprueba en la aplicación, no en la base de datos
clientes = Table(
    "clientes",
    metadata,
    Column("id_cliente", Integer, primary_key=True, autoincrement=True),
    Column("nombre", String(100), nullable=False),
    Column("apellidos", String(150), nullable=False),
    Column("email", String(255), nullable=False, index=True),
    Column("telefono", String(20), nullable=False),
    Column("pais", String(50)),
    Column("fecha_registro", Date, nullable=False),
)

propiedades = Table(
    "propiedades",
    metadata,
    Column("id_propiedad", Integer, primary_key=True, autoincrement=True),
    Column("nombre", String(100), nullable=False, index=True),
    Column("direccion", String(255), nullable=False),
    Column("ciudad", String(100), nullable=False),
    Column("pais", String(50), nullable=False),
    Column("precio_noche", Numeric(10, 2), nullable=False),
    Column("capacidad", Integer, nullable=False),
    Column("descripcion", String(500), nullable=False),
    Column("estado_propiedad", String(20), nullable=False),
)

reservas = Table(
    "reservas",
    metadata,
    Column("id_reserva", Integer, primary_key=True, autoincrement=True),
    Column("id_cliente", Integer, nullable=False),
    Column("id_propiedad", Integer, nullable=False),
    Column("fecha_inicio", Date, nullable=False),
    Column("fecha_fin", Date, nullable=False),
    Column("num_personas", Integer, nullable=False),
    Column("estado", String(20), nullable=False),
    Column("precio_total", Numeric(10, 2), nullable=False),
    Column("motivo_cancelacion", Text),
)

pagos = Table(
    "pagos",
    metadata,
    Column("id_pago", Integer, primary_key=True, autoincrement=True),
    Column("id_reserva", Integer, nullable=False),
    Column("fecha_pago", DateTime, nullable=False),
    Column("monto", Numeric(10, 2), nullable=False),
    Column("metodo_pago", String(20), nullable=False),
    Column("estado_pago", String(20), nullable=False),
    Column("referencia_transaccion", String(20), nullable=False, unique=True),
)

historico_pagos = Table(
    "historico_pagos",
    metadata,
    Column("id_historico", Integer, primary_key=True, autoincrement=True),
    Column("id_pago", Integer, nullable=False),
    Column("accion", String(20), nullable=False),
    Column("estado_anterior", String(20)),
    Column("estado_nuevo", String(20)),
    Column("monto_anterior", Numeric(10, 2)),
    Column("monto_nuevo", Numeric(10, 2)),
    Column("fecha_registro", DateTime, nullable=False, server_default=func.now()),
)

valoraciones = Table(
    "valoraciones",
    metadata,
    Column("id_valoracion", Integer, primary_key=True, autoincrement=True),
    Column("id_reserva", Integer, nullable=False),
    Column("puntuacion", Integer, nullable=False),
    Column("comentario", String(500)),
    Column("anonima", Boolean, nullable=False, default=False),
    Column("fecha_valoracion", DateTime, nullable=False),
)

# Procedimiento usado en PostgreSQL para alimentar historico_pagos
REGISTRAR_HISTORIAL_PAGO_DDL = """
CREATE OR REPLACE PROCEDURE registrar_historial_pago(
    p_id_pago INTEGER,
    p_accion VARCHAR(20),
    p_estado_anterior VARCHAR(20) DEFAULT NULL,
    p_estado_nuevo VARCHAR(20) DEFAULT NULL,
    p_monto_anterior NUMERIC(10,2) DEFAULT NULL,
    p_monto_nuevo NUMERIC(10,2) DEFAULT NULL
)
LANGUAGE plpgsql
AS $$
BEGIN
    INSERT INTO historico_pagos (
        id_pago, accion, estado_anterior, estado_nuevo, monto_anterior, monto_nuevo
    )
    VALUES (
        p_id_pago, p_accion, p_estado_anterior, p_estado_nuevo, p_monto_anterior, p_monto_nuevo
    );
END;
$$;
"""
