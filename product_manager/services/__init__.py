"""Business logic services for the product catalog."""

from product_manager.services.product_service import ProductService

__all__ = ["ProductService"]
