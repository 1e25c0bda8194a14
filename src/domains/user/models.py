import uuid6

from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.types import Uuid

from core.database import Base
from core.identity import Role


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid6.uuid7)
    name = Column(String(50), nullable=False)
    surname = Column(String(50), nullable=False)
    email = Column(String(128), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
    role = Column(String(10), nullable=False, default=Role.READER.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
