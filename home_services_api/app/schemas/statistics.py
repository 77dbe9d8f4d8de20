"""
Pydantic schema for the admin statistics overview.
"""

from typing import Dict

from pydantic import BaseModel


class StatsRead(BaseModel):
    users_count: int
    requests_count: int
    offers_count: int
    transactions_count: int
    reviews_count: int
    pending_amount: float
    requests_by_status: Dict[str, int]
