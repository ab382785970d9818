from datetime import datetime
from decimal import Decimal
from typing import Annotated, Dict, List, Literal, Union
from pydantic import BaseModel, Field, condecimal

Money = condecimal(gt=0, max_digits=10, decimal_places=2)
Weight = condecimal(ge=0)

Category = Literal[
    "food", "rent", "gas", "internet", "travel",
    "groceries", "entertainment", "utilities", "others",
]

class EqualSplit(BaseModel):
    split_type: Literal["equal"] = "equal"

    @property
    def split_details(self):
        return None

class UnequalSplit(BaseModel):
    split_type: Literal["unequal"]
    amounts: Dict[str, Weight]

    @property
    def split_details(self):
        return self.amounts

class PercentageSplit(BaseModel):
    split_type: Literal["percentage"]
    percentages: Dict[str, Weight]

    @property
    def split_details(self):
        return self.percentages

class ShareSplit(BaseModel):
    split_type: Literal["share"]
    shares: Dict[str, Weight]

    @property
    def split_details(self):
        return self.shares

SplitPolicy = Annotated[
    Union[EqualSplit, UnequalSplit, PercentageSplit, ShareSplit],
    Field(discriminator="split_type"),
]

class ExpenseCreate(BaseModel):
    amount: Money
    description: str | None = None
    category: Category = "others"
    paid_by: str | None = None
    used_by: List[str] = Field(..., min_length=1)
    split: SplitPolicy = Field(default_factory=EqualSplit)

class ExpenseUpdate(BaseModel):
    amount: Money | None = None
    description: str | None = None
    category: Category | None = None
    paid_by: str | None = None
    used_by: List[str] | None = Field(None, min_length=1)
    split: SplitPolicy | None = None

class ExpenseOut(BaseModel):
    id: int
    group_id: int
    amount: Decimal
    description: str | None = None
    category: str
    mode: str
    paid_by: str
    used_by: List[str]
    split_type: str
    split_details: Dict[str, Decimal] | None = None
    shares: Dict[str, Weight] = {}
    created_by: str
    created_at: datetime
    edited_by: str | None = None
    edited_at: datetime | None = None

    class Config:
        from_attributes = True
