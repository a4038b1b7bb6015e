# src/routes/invoices.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from src.core.database import get_db
from src.schemas.invoices import (
    InvoiceCreate, InvoiceUpdate, InvoiceResponse,
    InvoiceDeleteResponse, InvoiceSummary
)
from src.services.invoice_service import (
    InvoiceService, InvoiceNotFoundException, DuplicateInvoiceException
)


invoice_router = APIRouter(prefix="/invoices", tags=["Invoices"])


@invoice_router.post("",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    operation_id="createInvoice",
    summary="Create invoice"
)
def create_invoice(data: InvoiceCreate, db: Session = Depends(get_db)):
    """
    Create a new invoice.

    - **invoice_number**: must not already exist
    - **amount_due**: positive, stored with 2 decimal places
    - **paid**: defaults to false
    """
    try:
        return InvoiceService.create(db, data)
    except DuplicateInvoiceException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@invoice_router.get("",
    response_model=List[InvoiceResponse],
    operation_id="getInvoices",
    summary="List invoices, newest first"
)
def list_invoices(db: Session = Depends(get_db)):
    return InvoiceService.list(db)


# Declared before /{invoice_id} so "summary" is not parsed as an id
@invoice_router.get("/summary",
    response_model=InvoiceSummary,
    operation_id="getInvoiceSummary",
    summary="Outstanding total and overdue count"
)
def invoice_summary(db: Session = Depends(get_db)):
    return InvoiceService.summary(db)


@invoice_router.get("/{invoice_id}",
    response_model=InvoiceResponse,
    operation_id="getInvoice",
    summary="Get invoice"
)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    try:
        return InvoiceService.get(db, invoice_id)
    except InvoiceNotFoundException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@invoice_router.patch("/{invoice_id}",
    response_model=InvoiceResponse,
    operation_id="updateInvoice",
    summary="Update invoice fields"
)
def update_invoice(invoice_id: int, data: InvoiceUpdate, db: Session = Depends(get_db)):
    """
    Partially update an invoice. Fields left out of the payload keep
    their stored value; `updated_at` is always refreshed.
    """
    try:
        return InvoiceService.update(db, invoice_id, data)
    except InvoiceNotFoundException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except DuplicateInvoiceException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@invoice_router.delete("/{invoice_id}",
    response_model=InvoiceDeleteResponse,
    operation_id="deleteInvoice",
    summary="Delete invoice"
)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    try:
        return InvoiceService.delete(db, invoice_id)
    except InvoiceNotFoundException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
