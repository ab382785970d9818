from decimal import Decimal
from pydantic import BaseModel

class BalanceSummary(BaseModel):
    uid: str
    name: str
    photo_url: str | None = None
    total_paid: Decimal
    total_used: Decimal
    net_balance: Decimal  # positive means owed money, negative means owes

class Debt(BaseModel):
    from_user: str
    to_user: str
    amount: Decimal

class PoolSummary(BaseModel):
    total_collected: Decimal
    total_spent: Decimal
    remaining: Decimal

class GroupBalanceOut(BaseModel):
    balances: list[BalanceSummary]
    debts: list[Debt]
    pool: PoolSummary | None = None
