"""Database models."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Numeric
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class Order(Base):
    """Placed order with its shipping address flattened into columns."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    buyer_id = Column(String, index=True, nullable=False)
    order_date = Column(DateTime, default=datetime.utcnow, nullable=False)
    ship_to_street = Column(String(180), nullable=False)
    ship_to_city = Column(String(100), nullable=False)
    ship_to_state = Column(String(60), nullable=False)
    ship_to_country = Column(String(90), nullable=False)
    ship_to_zip_code = Column(String(18), nullable=False)

    # Relationships
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")


class OrderItem(Base):
    """Order line holding a snapshot of the catalog item."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    catalog_item_id = Column(Integer, nullable=False)
    product_name = Column(String(50), nullable=False)
    picture_uri = Column(String, nullable=True)
    unit_price = Column(Numeric(18, 2), nullable=False)
    units = Column(Integer, default=1, nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
