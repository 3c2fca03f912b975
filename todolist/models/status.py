# todolist/models/status.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from todolist.database import Base


class Status(Base):
    __tablename__ = "statuses"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(50), nullable=False)
    # "#RRGGBB" or "#RRGGBBAA"
    color = Column(String(9), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    # internal back-reference, never serialized
    todos = relationship("Todo", back_populates="status")
