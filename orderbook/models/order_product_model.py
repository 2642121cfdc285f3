# orderbook/models/order_product_model.py
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from orderbook.database.session import Base
from orderbook.models._ids import new_id, utcnow


class OrderProduct(Base):
    __tablename__ = "order_products"
    id         = Column(String(36), primary_key=True, default=new_id)
    order_id   = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)
    quantity   = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint("order_id", "product_id", name="uq_order_products_order_product"),
        CheckConstraint("quantity > 0", name="ck_order_products_quantity_positive"),
    )

    order   = relationship("Order", back_populates="items")
    product = relationship("Product")
