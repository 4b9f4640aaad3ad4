import asyncio
import sys
import os

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app.config import Config
from app.database import build_engine, init_db

async def main():
    print("Initializing Database Tables...")
    engine = build_engine()
    try:
        await init_db(engine, seed=Config.SEED_DEFAULTS)
        print("✅ Tables Created Successfully.")
    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        raise
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
