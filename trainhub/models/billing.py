# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trainer billing models."""

import datetime

from pydantic import BaseModel, Field

from trainhub.models.common import BillStatus, EntityModel, ExpenseType


class Expense(EntityModel):
    """A single expense line."""

    type: ExpenseType
    description: str = ""
    amount: float = Field(ge=0)


class TrainerBill(EntityModel):
    """A trainer's expense claim.

    The amount is always the sum of the expense amounts.
    """

    id: str
    trainer_id: str
    amount: float
    expenses: tuple[Expense, ...]
    date: datetime.date
    status: BillStatus = BillStatus.PENDING
    invoice_number: str


class BillCreate(BaseModel):
    """Payload for submitting a bill; amount, status and invoice are derived."""

    trainer_id: str
    expenses: list[Expense] = Field(default_factory=list)
    date: datetime.date


class BillStatusUpdate(BaseModel):
    """Payload for changing a bill's status."""

    status: BillStatus
