# backend/pagecraft/models/user.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from ..database import Base
from .base import new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String(255), nullable=False, unique=True)

    documents = relationship("Document", back_populates="owner")
