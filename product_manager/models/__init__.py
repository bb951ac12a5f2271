"""SQLAlchemy models for the product catalog."""

from product_manager.models.product import Product

__all__ = ["Product"]
