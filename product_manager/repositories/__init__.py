"""Data access for the product catalog."""

from product_manager.repositories.product_repository import (
    ProductRepository,
    SqlAlchemyProductRepository,
)

__all__ = [
    "ProductRepository",
    "SqlAlchemyProductRepository",
]
