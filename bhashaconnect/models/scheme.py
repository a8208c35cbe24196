# scheme.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, true
from sqlalchemy.sql import func

from bhashaconnect.database import Base


class Scheme(Base):
    """Government scheme listing. Admin-managed, so there is no creator column."""

    __tablename__ = "schemes"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    eligibility = Column(Text, nullable=False)
    link = Column(Text, nullable=True)
    language = Column(String(50), index=True, nullable=False)
    category = Column(String(100), index=True, nullable=True)
    is_active = Column(Boolean, index=True, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
