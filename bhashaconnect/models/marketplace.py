# marketplace.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bhashaconnect.database import Base


class MarketplaceEntry(Base):
    __tablename__ = "marketplace"

    id = Column(Integer, primary_key=True, index=True)
    business_name = Column(String(255), nullable=False)
    owner_name = Column(String(255), nullable=False)
    product_service = Column(Text, nullable=False)
    contact = Column(String(255), nullable=False)
    language = Column(String(50), index=True, nullable=False)
    location = Column(String(255), index=True, nullable=True)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    creator = relationship("User", back_populates="marketplace_entries")

    @property
    def created_by_name(self) -> str | None:
        return self.creator.name if self.creator is not None else None
