from decimal import Decimal
from pydantic import BaseModel
from synsplit.schemas.balances import PoolSummary

class CategorySpend(BaseModel):
    category: str
    amount: Decimal
    percent: Decimal

class MonthlySpend(BaseModel):
    month: str  # "2026-02"
    amount: Decimal

class PersonSpend(BaseModel):
    uid: str
    name: str
    photo_url: str | None = None
    amount: Decimal

class MemberStats(BaseModel):
    uid: str
    total_spend: Decimal
    you_paid: Decimal
    you_get: Decimal
    you_owe: Decimal

class GroupAnalyticsOut(BaseModel):
    total_spend: Decimal
    total_contributions: Decimal
    categories: list[CategorySpend]
    monthly: list[MonthlySpend]
    people: list[PersonSpend]
    you: MemberStats
    pool: PoolSummary | None = None
