"""FastAPI routes for the product catalog JSON API."""

from product_manager.api.products import router as products_router

__all__ = ["products_router"]
