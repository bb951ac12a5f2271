"""Product model for the catalog."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from product_manager.database import Base

# Range of the 32-bit INTEGER columns
INTEGER_MIN = -2_147_483_648
INTEGER_MAX = 2_147_483_647


class Product(Base):
    """Product model representing a catalog entry.

    Attributes:
        id: Server-assigned identifier, immutable once set
        name: Product name (2-100 characters)
        description: Product description (10-500 characters)
        price: Unit price in currency units (0.01 - 999,999.99)
        quantity: Units in stock (non-negative)
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint(
            "price >= 0.01 AND price <= 999999.99", name="ck_products_price_range"
        ),
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
    )

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id!r}, name={self.name!r})>"
