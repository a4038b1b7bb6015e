# src/models/invoices.py
from datetime import date, datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, Boolean, false
from sqlalchemy.sql import func
from src.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True)
    invoice_number = Column(String(100), nullable=False, unique=True, index=True)
    client_name = Column(String(255), nullable=False)
    client_email = Column(String(255), nullable=False)
    amount_due = Column(Numeric(10, 2), nullable=False)
    issue_date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False)
    services_rendered = Column(Text, nullable=False)
    paid = Column(Boolean, nullable=False, default=False, server_default=false())

    # Assigned in Python so consecutive writes never share a timestamp
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())

    def is_overdue(self, today: date | None = None) -> bool:
        """Unpaid and past its due date. Never stored."""
        today = today or date.today()
        return not self.paid and self.due_date < today

    def __repr__(self):
        return f"<Invoice {self.invoice_number} ({self.amount_due})>"
