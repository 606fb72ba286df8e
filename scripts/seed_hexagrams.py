"""Seed the 64-hexagram catalog into the hexagrams table.

Usage: python -m scripts.seed_hexagrams [--replace]
"""
import argparse
import asyncio

from wisdom_lenses.config import get_settings
from wisdom_lenses.data.hexagrams import HEXAGRAMS
from wisdom_lenses.database import build_engine, build_session_factory
from wisdom_lenses.services.hexagram_store import HexagramStore


async def seed(replace: bool = False):
    engine = build_engine(get_settings())
    session_factory = build_session_factory(engine)
    try:
        async with session_factory() as session:
            store = HexagramStore(session)
            if replace:
                inserted = await store.seed(HEXAGRAMS)
                print(f"  Replaced catalog with {inserted} hexagrams.")
            else:
                counts = await store.upsert_many(HEXAGRAMS)
                print(
                    f"  Inserted {counts['inserted']} hexagrams, "
                    f"refreshed {counts['updated']} existing ones."
                )
            await session.commit()
    finally:
        await engine.dispose()
    print("Done seeding hexagrams.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the hexagram catalog")
    parser.add_argument(
        "--replace", action="store_true", help="Delete every entry before inserting"
    )
    args = parser.parse_args()
    asyncio.run(seed(args.replace))
