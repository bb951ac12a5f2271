"""Schema creation and first-run seed data for the product catalog."""

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from product_manager.database import Base
from product_manager.models.product import Product

logger = logging.getLogger(__name__)

# Sample products inserted into an empty catalog
SEED_PRODUCTS = [
    {
        "name": "Laptop",
        "description": "High-performance laptop for professionals",
        "price": Decimal("999.99"),
        "quantity": 10,
    },
    {
        "name": "Mouse",
        "description": "Wireless ergonomic mouse with precision tracking",
        "price": Decimal("29.99"),
        "quantity": 50,
    },
    {
        "name": "Keyboard",
        "description": "Mechanical keyboard with RGB backlighting",
        "price": Decimal("89.99"),
        "quantity": 25,
    },
]


async def initialize_database(
    engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
) -> int:
    """Create missing tables and seed the catalog if it is empty.

    Args:
        engine: Engine used to create the schema
        session_factory: Session factory used to count and insert rows

    Returns:
        Number of products inserted (0 when the catalog already has rows)
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as session:
        count = await session.scalar(select(func.count()).select_from(Product))
        if count:
            logger.info("Catalog already has %d products, skipping seed", count)
            return 0

        session.add_all([Product(**product) for product in SEED_PRODUCTS])
        await session.commit()

    logger.info("Seeded catalog with %d products", len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)
