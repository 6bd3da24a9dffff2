from sqlalchemy import Column, DateTime, Enum, Numeric, String, Uuid, func
from sqlalchemy.orm import relationship
import uuid
from shared.core.database import Base, utcnow

from ..enum.properties_enum import PropertyStatus


class Property(Base):
    __tablename__ = "properties"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    address = Column(String(200), nullable=False)
    owner_name = Column(String(100), nullable=False)
    monthly_rent = Column(Numeric(10, 2), nullable=False)
    status = Column(
        Enum(PropertyStatus, name="property_status_enum"),
        nullable=False,
        default=PropertyStatus.VACANT,
        index=True
    )

    created_at = Column(DateTime(timezone=True),
                        default=utcnow, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True),
                        default=utcnow, server_default=func.now(), onupdate=utcnow)

    # Relationships
    tasks = relationship(
        "Task",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="Task.due_date"
    )
