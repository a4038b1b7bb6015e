# src/services/invoice_service.py
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional, Dict
import logging

from src.models.invoices import Invoice
from src.schemas.invoices import InvoiceCreate, InvoiceUpdate, CENT

logger = logging.getLogger(__name__)


# ================================
# CUSTOM EXCEPTIONS
# ================================
class InvoiceException(Exception):
    """Base exception for invoice operations"""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvoiceNotFoundException(InvoiceException):
    """Raised when no invoice matches the requested id"""
    def __init__(self, message: str = "Invoice not found"):
        super().__init__(message, status_code=404)


class DuplicateInvoiceException(InvoiceException):
    """Raised when an invoice number is already in use"""
    def __init__(self, message: str = "Invoice number already exists"):
        super().__init__(message, status_code=409)


# ================================
# INVOICE SERVICE
# ================================
class InvoiceService:

    @staticmethod
    def _ensure_number_available(db: Session, invoice_number: str, exclude_id: Optional[int] = None):
        # Advisory only; the unique constraint on invoice_number is authoritative
        query = db.query(Invoice).filter(Invoice.invoice_number == invoice_number)
        if exclude_id is not None:
            query = query.filter(Invoice.id != exclude_id)
        if query.first():
            raise DuplicateInvoiceException(f"Invoice number {invoice_number} already exists")

    @staticmethod
    def create(db: Session, data: InvoiceCreate) -> Invoice:
        InvoiceService._ensure_number_available(db, data.invoice_number)

        now = datetime.now(timezone.utc)
        invoice = Invoice(**data.model_dump(), created_at=now, updated_at=now)
        db.add(invoice)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Integrity error creating invoice {data.invoice_number}: {e}")
            raise DuplicateInvoiceException(f"Invoice number {data.invoice_number} already exists")
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating invoice: {str(e)}")
            raise

        db.refresh(invoice)
        logger.info(f"Invoice created: {invoice.invoice_number} (ID: {invoice.id})")
        return invoice

    @staticmethod
    def get(db: Session, invoice_id: int) -> Invoice:
        invoice = db.get(Invoice, invoice_id)
        if not invoice:
            raise InvoiceNotFoundException(f"Invoice with ID {invoice_id} not found")
        return invoice

    @staticmethod
    def list(db: Session) -> List[Invoice]:
        return (
            db.query(Invoice)
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
            .all()
        )

    @staticmethod
    def update(db: Session, invoice_id: int, data: InvoiceUpdate) -> Invoice:
        invoice = InvoiceService.get(db, invoice_id)
        changes = data.model_dump(exclude_unset=True)

        if "invoice_number" in changes and changes["invoice_number"] != invoice.invoice_number:
            InvoiceService._ensure_number_available(db, changes["invoice_number"], exclude_id=invoice_id)

        for field, value in changes.items():
            setattr(invoice, field, value)
        invoice.updated_at = datetime.now(timezone.utc)

        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Integrity error updating invoice {invoice_id}: {e}")
            raise DuplicateInvoiceException(f"Invoice number {changes.get('invoice_number')} already exists")
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating invoice {invoice_id}: {str(e)}")
            raise

        db.refresh(invoice)
        logger.info(f"Invoice updated: {invoice_id} (fields: {', '.join(changes) or 'none'})")
        return invoice

    @staticmethod
    def delete(db: Session, invoice_id: int) -> Dict[str, bool]:
        invoice = InvoiceService.get(db, invoice_id)
        db.delete(invoice)
        try:
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting invoice {invoice_id}: {str(e)}")
            raise

        logger.info(f"Invoice deleted: {invoice_id}")
        return {"success": True}

    @staticmethod
    def summary(db: Session, today: Optional[date] = None) -> Dict:
        """
        Dashboard figures derived from the full invoice list:
        outstanding total of unpaid invoices and how many of them are overdue.
        """
        today = today or date.today()
        invoices = InvoiceService.list(db)
        unpaid = [inv for inv in invoices if not inv.paid]
        outstanding = sum((Decimal(inv.amount_due) for inv in unpaid), Decimal("0"))

        return {
            "total_invoices": len(invoices),
            "paid_count": len(invoices) - len(unpaid),
            "unpaid_count": len(unpaid),
            "overdue_count": sum(1 for inv in unpaid if inv.is_overdue(today)),
            "outstanding_total": float(outstanding.quantize(CENT)),
        }
