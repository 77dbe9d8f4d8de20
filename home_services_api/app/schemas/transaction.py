"""
Pydantic models for settlement records.

Transactions are ledger rows for money owed.  They are never reconciled
with an external payment provider, so every row stays ``pending``.
"""

from typing import Literal, Optional

from pydantic import BaseModel

TransactionType = Literal["payment", "commission", "payout"]
TransactionStatus = Literal["pending", "completed", "failed"]


class TransactionRead(BaseModel):
    id: int
    user_id: int
    offer_id: Optional[int] = None
    amount: float
    type: TransactionType
    status: TransactionStatus
    created_at: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
