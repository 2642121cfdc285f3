# orderbook/models/product_model.py
from sqlalchemy import Column, Numeric, String
from sqlalchemy.types import Unicode

from orderbook.database.session import Base
from orderbook.models._ids import new_id


class Product(Base):
    __tablename__ = "products"
    id       = Column(String(36), primary_key=True, default=new_id)
    name     = Column(Unicode(255), nullable=False)
    category = Column(Unicode(100), nullable=True)
    price    = Column(Numeric(12, 2), nullable=False)
