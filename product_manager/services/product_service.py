"""Product service sitting between the controllers and the repository."""

import logging

from product_manager.models.product import Product
from product_manager.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Delegates catalog operations to a ``ProductRepository``.

    Controllers call ``exists`` before mutating so they can answer
    not-found without touching the repository's write path.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    async def get_all(self) -> list[Product]:
        logger.debug("Listing products")
        return await self.repository.get_all()

    async def get_by_id(self, product_id: int) -> Product | None:
        logger.debug("Fetching product %d", product_id)
        return await self.repository.get_by_id(product_id)

    async def add(self, product: Product) -> Product:
        created = await self.repository.add(product)
        logger.info("Created product %d", created.id)
        return created

    async def update(self, product: Product) -> None:
        await self.repository.update(product)
        logger.info("Updated product %d", product.id)

    async def delete(self, product_id: int) -> None:
        await self.repository.delete(product_id)
        logger.info("Deleted product %d", product_id)

    async def exists(self, product_id: int) -> bool:
        return await self.repository.exists(product_id)
