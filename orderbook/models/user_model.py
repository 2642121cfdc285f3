# orderbook/models/user_model.py
from sqlalchemy import Column, String
from sqlalchemy.types import Unicode

from orderbook.database.session import Base
from orderbook.models._ids import new_id


class User(Base):
    __tablename__ = "users"
    id         = Column(String(36), primary_key=True, default=new_id)
    first_name = Column(Unicode(100), nullable=False)
    last_name  = Column(Unicode(100), nullable=False)
    user_name  = Column(Unicode(64), unique=True, nullable=False)
    email      = Column(Unicode(255), unique=True, nullable=False)
    password   = Column(Unicode(255), nullable=False)  # stored as given, hashing is the caller's job
