# user.py
from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bhashaconnect.database import Base
from bhashaconnect.models.enums import Role


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    role = Column(Enum(Role, name="user_role"), nullable=False, default=Role.jobseeker)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Rows created by this user go with them; the FK also cascades at the DB level.
    jobs = relationship("Job", back_populates="creator", cascade="all, delete-orphan", passive_deletes=True)
    training_content = relationship(
        "TrainingContent", back_populates="creator", cascade="all, delete-orphan", passive_deletes=True
    )
    marketplace_entries = relationship(
        "MarketplaceEntry", back_populates="creator", cascade="all, delete-orphan", passive_deletes=True
    )
