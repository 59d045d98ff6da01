# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Billing API endpoints.

This module provides endpoints for trainer expense bills:
- GET / - List bills, newest first, optionally for one trainer
- POST / - Submit a bill (amount and invoice number are derived)
- PATCH /{bill_id}/status - Mark a bill PENDING or PAID
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from trainhub.api.dependencies import Store
from trainhub.models import BillCreate, BillStatusUpdate, TrainerBill

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[TrainerBill],
    summary="List bills",
)
async def list_bills(
    store: Store,
    trainer_id: Annotated[str | None, Query(description="Filter by trainer")] = None,
) -> list[TrainerBill]:
    bills = store.bills
    if trainer_id is not None:
        bills = [b for b in bills if b.trainer_id == trainer_id]
    return bills


@router.post(
    "",
    response_model=TrainerBill,
    status_code=status.HTTP_201_CREATED,
    summary="Submit bill",
)
async def create_bill(data: BillCreate, store: Store) -> TrainerBill:
    return store.add_bill(data)


@router.patch(
    "/{bill_id}/status",
    response_model=TrainerBill,
    summary="Update bill status",
)
async def update_bill_status(
    bill_id: str,
    data: BillStatusUpdate,
    store: Store,
) -> TrainerBill:
    """Change a bill's status.

    Args:
        bill_id: Bill to update.
        data: New status.
        store: Domain store.

    Returns:
        The updated bill.

    Raises:
        HTTPException: 404 if the bill does not exist.
    """
    bill = store.update_bill_status(bill_id, data.status)
    if bill is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bill not found",
        )
    return bill
