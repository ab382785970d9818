"""
Request and response shapes for the stateless ledger endpoint.

Split types stay plain strings here: a snapshot exported from older data may
carry split types we no longer recognise, and those resolve as equal splits
instead of being rejected.
"""
from decimal import Decimal
from typing import Dict, List
from pydantic import BaseModel, Field
from synsplit.schemas.balances import BalanceSummary, Debt

class Member(BaseModel):
    uid: str
    name: str
    photo_url: str | None = None

class LedgerExpense(BaseModel):
    amount: Decimal = Field(..., gt=0)
    paid_by: str
    used_by: List[str]
    split_type: str = "equal"
    split_details: Dict[str, Decimal] | None = None

class LedgerContribution(BaseModel):
    user_id: str
    amount: Decimal = Field(..., gt=0)

class LedgerSettlement(BaseModel):
    from_user: str
    to_user: str
    amount: Decimal = Field(..., gt=0)

class LedgerSnapshot(BaseModel):
    members: List[Member]
    expenses: List[LedgerExpense] = []
    contributions: List[LedgerContribution] = []
    settlements: List[LedgerSettlement] = []

class LedgerOut(BaseModel):
    balances: List[BalanceSummary]
    debts: List[Debt]
