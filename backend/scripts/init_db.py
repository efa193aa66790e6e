"""
Provision the properties table without starting the API server.

Run with: python -m scripts.init_db
"""
import asyncio
import logging
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from property_inventory.config import get_settings
from property_inventory.database import build_engine, init_db, close_db

logger = logging.getLogger(__name__)


async def provision() -> int:
    """Create the properties table, returning a process exit code"""
    settings = get_settings()
    engine = build_engine(settings)
    try:
        await init_db(engine)
    except Exception as e:
        logger.error(f"Provisioning failed: {e}")
        return 1
    finally:
        await close_db(engine)

    print(f"\n{'='*50}")
    print("Properties table is ready")
    print(f"{'='*50}\n")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    sys.exit(asyncio.run(provision()))
