# scripts/create_tables.py
import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
from marketplace.infrastructure.database.session import Base, engine, init_models


async def create_tables():
    await init_models(engine)
    print("Tables ready:", ", ".join(sorted(Base.metadata.tables)))
    await engine.dispose()

asyncio.run(create_tables())
