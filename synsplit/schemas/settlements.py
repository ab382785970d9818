from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel
from synsplit.schemas.expense import Money

class SettlementCreate(BaseModel):
    from_user: str | None = None
    to_user: str
    amount: Money

class SettlementOut(BaseModel):
    id: int
    group_id: int
    from_user: str
    to_user: str
    amount: Decimal
    created_at: datetime

    class Config:
        from_attributes = True
