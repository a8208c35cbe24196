# training.py
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from bhashaconnect.database import Base
from bhashaconnect.models.enums import TrainingType


class TrainingContent(Base):
    __tablename__ = "training_content"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    type = Column(Enum(TrainingType, name="training_type"), index=True, nullable=False)
    url = Column(Text, nullable=False)
    language = Column(String(50), index=True, nullable=False)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    creator = relationship("User", back_populates="training_content")

    @property
    def created_by_name(self) -> str | None:
        return self.creator.name if self.creator is not None else None
