from datetime import datetime
from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field
from synsplit.schemas.expense import Money, Category

class RecurringCreate(BaseModel):
    amount: Money
    description: str = Field(..., min_length=1)
    category: Category = "utilities"
    day_of_month: int = Field(1, ge=1, le=28)
    # defaults to every current member
    used_by: List[str] | None = Field(None, min_length=1)

class RecurringUpdate(BaseModel):
    active: bool

class RecurringOut(BaseModel):
    id: int
    group_id: int
    amount: Decimal
    description: str
    category: str
    day_of_month: int
    used_by: List[str]
    created_by: str
    created_at: datetime
    active: bool
    last_added: str | None = None

    class Config:
        from_attributes = True
