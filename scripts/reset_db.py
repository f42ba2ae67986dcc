import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from gestion_reservas.config import get_settings  # noqa: E402
from gestion_reservas.infrastructure.db.engine import build_engine, create_schema  # noqa: E402
from gestion_reservas.infrastructure.db.tables import metadata  # noqa: E402


async def reset():
    settings = get_settings()
    engine = build_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        print("Dropped all tables.")

    await create_schema(engine, with_stored_procedure=settings.audit_use_stored_procedure)
    print("Recreated all tables.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(reset())
