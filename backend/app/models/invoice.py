from enum import Enum

from sqlalchemy import Column, Date, ForeignKey, Integer, String

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    customer_id = Column(
        String(36), ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    # Minor currency units (cents)
    amount = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, index=True)
    date = Column(Date, nullable=False)
