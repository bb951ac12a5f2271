"""Server-rendered HTML views for the product catalog."""

from product_manager.web.products import router as products_view_router

__all__ = ["products_view_router"]
