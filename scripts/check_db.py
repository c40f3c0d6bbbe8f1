# scripts/check_db.py
import sys
from pathlib import Path
from sqlalchemy import text

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
from marketplace.infrastructure.database.session import DATABASE_URL, engine


async def check_connection():
    async with engine.begin() as conn:
        result = await conn.execute(text("SELECT 1"))
        print("DB Connected:", DATABASE_URL, result.scalar())
    await engine.dispose()

asyncio.run(check_connection())
