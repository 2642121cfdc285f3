# orderbook/models/order_model.py
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from orderbook.database.session import Base
from orderbook.models._ids import new_id, utcnow


class Order(Base):
    __tablename__ = "orders"
    id         = Column(String(36), primary_key=True, default=new_id)
    user_id    = Column(String(36), ForeignKey("users.id"), nullable=False)
    is_done    = Column(Boolean, nullable=False, default=False)  # True once finalized, never reopened
    created_at = Column(DateTime, nullable=False, default=utcnow)
    done_at    = Column(DateTime, nullable=True)

    user  = relationship("User")
    items = relationship("OrderProduct", cascade="all, delete-orphan", back_populates="order")
