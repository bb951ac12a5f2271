"""FastAPI dependency providers wiring repository and service per request."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from product_manager.database import get_db
from product_manager.repositories.product_repository import (
    ProductRepository,
    SqlAlchemyProductRepository,
)
from product_manager.services.product_service import ProductService


def get_product_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProductRepository:
    """Dependency that provides the product repository for this request."""
    return SqlAlchemyProductRepository(db)


def get_product_service(
    repository: Annotated[ProductRepository, Depends(get_product_repository)],
) -> ProductService:
    """Dependency that provides the product service for this request."""
    return ProductService(repository)


ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
