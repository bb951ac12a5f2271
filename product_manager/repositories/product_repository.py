"""Product repository contract and its SQLAlchemy implementation.

The repository is the only layer that talks to the store. Callers check
existence before mutating, so ``update`` and ``delete`` quietly do
nothing when the row is gone.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from product_manager.models.product import INTEGER_MAX, INTEGER_MIN, Product

logger = logging.getLogger(__name__)


def is_storable_id(product_id: int) -> bool:
    """Return whether an ID fits the ID column; others were never issued."""
    return INTEGER_MIN <= product_id <= INTEGER_MAX


class ProductRepository(ABC):
    """Async CRUD operations over stored products."""

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """Return every product, ordered by ID."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned ID."""

    @abstractmethod
    async def update(self, product: Product) -> None:
        """Replace the business fields of the stored product with the same ID."""

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        """Remove the product with the given ID."""

    @abstractmethod
    async def exists(self, product_id: int) -> bool:
        """Return whether a product with the given ID is stored."""


class SqlAlchemyProductRepository(ProductRepository):
    """Product repository backed by an async SQLAlchemy session.

    IDs outside the column's range are answered as absent without a
    query; the driver would reject them.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_all(self) -> list[Product]:
        result = await self.session.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def get_by_id(self, product_id: int) -> Product | None:
        if not is_storable_id(product_id):
            return None

        result = await self.session.execute(
            select(Product).where(Product.id == product_id)
        )
        return result.scalar_one_or_none()

    async def add(self, product: Product) -> Product:
        # The store assigns the ID
        product.id = None
        self.session.add(product)
        await self.session.commit()
        await self.session.refresh(product)
        logger.debug("Inserted product %d (%s)", product.id, product.name)
        return product

    async def update(self, product: Product) -> None:
        existing = await self.get_by_id(product.id)
        if existing is None:
            logger.debug("Update skipped, product %d not found", product.id)
            return

        existing.name = product.name
        existing.description = product.description
        existing.price = product.price
        existing.quantity = product.quantity
        await self.session.commit()

    async def delete(self, product_id: int) -> None:
        if not is_storable_id(product_id):
            return

        await self.session.execute(delete(Product).where(Product.id == product_id))
        await self.session.commit()

    async def exists(self, product_id: int) -> bool:
        if not is_storable_id(product_id):
            return False

        result = await self.session.execute(
            select(exists().where(Product.id == product_id))
        )
        return bool(result.scalar())
