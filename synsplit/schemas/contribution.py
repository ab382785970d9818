from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from synsplit.schemas.expense import Money

class ContributionCreate(BaseModel):
    amount: Money
    month: str | None = Field(None, pattern=r"^\d{4}-(0[1-9]|1[0-2])$")

class ContributionOut(BaseModel):
    id: int
    group_id: int
    user_id: str
    amount: Decimal
    month: str
    created_at: datetime

    class Config:
        from_attributes = True
