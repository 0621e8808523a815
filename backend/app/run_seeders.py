import asyncio

from app.main import import_models
from app.seeds.seed_catalog import seed_catalog
from sustainhub.core.config import settings
from sustainhub.db.database import Database


async def main():
    print("Starting DB seeding...")

    import_models()
    db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
    try:
        await db.create_all()
        async with db.session() as session:
            counts = await seed_catalog(session)
    finally:
        await db.dispose()

    print(f"All seeders completed! {counts}")

if __name__ == "__main__":
    asyncio.run(main())
