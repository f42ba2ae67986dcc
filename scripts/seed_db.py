import asyncio
import sys
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from sqlalchemy import insert  # noqa: E402

from gestion_reservas.config import get_settings  # noqa: E402
from gestion_reservas.infrastructure.db.engine import build_engine, create_schema  # noqa: E402
from gestion_reservas.infrastructure.db.tables import (  # noqa: E402
    clientes,
    historico_pagos,
    pagos,
    propiedades,
    reservas,
    valoraciones,
)


async def seed():
    settings = get_settings()
    engine = build_engine(settings)
    await create_schema(engine, with_stored_procedure=settings.audit_use_stored_procedure)

    async with engine.begin() as conn:
        await conn.execute(
            insert(clientes).values(
                id_cliente=1,
                nombre="Lucía",
                apellidos="Fernández Ruiz",
                email="lucia.fernandez@example.com",
                telefono="+34600111222",
                pais="España",
                fecha_registro=date(2025, 1, 15),
            )
        )
        await conn.execute(
            insert(propiedades).values(
                id_propiedad=1,
                nombre="Casa del Mar",
                direccion="Paseo Marítimo 12",
                ciudad="Málaga",
                pais="España",
                precio_noche=Decimal("85.00"),
                capacidad=4,
                descripcion="Apartamento frente a la playa con terraza",
                estado_propiedad="disponible",
            )
        )
        await conn.execute(
            insert(reservas).values(
                id_reserva=1,
                id_cliente=1,
                id_propiedad=1,
                fecha_inicio=date(2025, 7, 1),
                fecha_fin=date(2025, 7, 8),
                num_personas=2,
                estado="confirmada",
                precio_total=Decimal("595.00"),
            )
        )
        await conn.execute(
            insert(pagos).values(
                id_pago=1,
                id_reserva=1,
                fecha_pago=datetime(2025, 6, 1, 10, 30),
                monto=Decimal("595.00"),
                metodo_pago="tarjeta",
                estado_pago="completado",
                referencia_transaccion="TXN001",
            )
        )
        await conn.execute(
            insert(historico_pagos).values(
                id_pago=1,
                accion="INSERT",
                estado_nuevo="completado",
                monto_nuevo=Decimal("595.00"),
            )
        )
        await conn.execute(
            insert(valoraciones).values(
                id_reserva=1,
                puntuacion=5,
                comentario="Todo perfecto",
                anonima=False,
                fecha_valoracion=datetime(2025, 7, 9, 18, 0),
            )
        )
        print("Seeded basic data.")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
