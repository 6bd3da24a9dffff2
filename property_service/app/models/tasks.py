from sqlalchemy import Column, DateTime, Enum, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import relationship
import uuid
from shared.core.database import Base, utcnow

from ..enum.tasks_enum import TaskStatus, TaskType


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    property_id = Column(Uuid(as_uuid=True), ForeignKey(
        "properties.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(Text, nullable=False)
    type = Column(Enum(TaskType, name="task_type_enum"),
                  nullable=False, index=True)
    assigned_to = Column(String(100), nullable=False)
    status = Column(
        Enum(TaskStatus, name="task_status_enum"),
        nullable=False,
        default=TaskStatus.PENDING,
        index=True
    )
    # naive UTC
    due_date = Column(DateTime, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        default=utcnow, server_default=func.now(), onupdate=utcnow)

    # Relationships
    property = relationship("Property", back_populates="tasks")
