# todolist/models/todo.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from todolist.database import Base
from todolist.models.tag import Tag, todo_tags


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)

    # deleting a priority/status keeps the todo and clears the reference
    priority_id = Column(Integer, ForeignKey("priorities.id", ondelete="SET NULL"), nullable=True, index=True)
    status_id = Column(Integer, ForeignKey("statuses.id", ondelete="SET NULL"), nullable=True, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    priority = relationship("Priority", back_populates="todos")
    status = relationship("Status", back_populates="todos")
    tags = relationship(Tag, secondary=todo_tags, back_populates="todos", order_by=Tag.id)
