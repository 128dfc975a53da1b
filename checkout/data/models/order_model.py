"""SQLAlchemy ORM models for Order aggregate.

No relationship() is declared: the repository loads and writes item rows
explicitly so that parent/child consistency stays in one place.
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, String

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(255), primary_key=True)
    customer_id = Column(String(255), ForeignKey("customers.id"), nullable=False, index=True)

    # Denormalized; the domain recomputes it from items on load
    total = Column(Numeric(15, 2), nullable=False)

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer_id={self.customer_id}, total={self.total})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(String(255), primary_key=True)
    order_id = Column(
        String(255),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = Column(String(255), ForeignKey("products.id"), nullable=False)

    # Product snapshot
    name = Column(String(500), nullable=False)
    price = Column(Numeric(15, 2), nullable=False)

    quantity = Column(Integer, nullable=False)

    # Ordinal inside the order, written from the in-memory list index
    position = Column(Integer, nullable=False)

    __table_args__ = (
        Index("ix_order_items_order_position", "order_id", "position"),
    )

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, order_id={self.order_id}, quantity={self.quantity})>"
