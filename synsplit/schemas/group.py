from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field

ExpenseMode = Literal["pool", "direct"]

class GroupCreate(BaseModel):
    name: str = Field(..., min_length=1)
    mode: ExpenseMode = "direct"

class GroupUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    mode: ExpenseMode | None = None
    allow_member_expenses: bool | None = None

class GroupOut(BaseModel):
    id: int
    name: str
    mode: ExpenseMode
    allow_member_expenses: bool
    created_by: str
    created_at: datetime

    class Config:
        from_attributes = True

class MemberCreate(BaseModel):
    uid: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: str | None = None
    photo_url: str | None = None

class GroupMemberOut(BaseModel):
    uid: str
    name: str
    email: str | None = None
    photo_url: str | None = None

    class Config:
        from_attributes = True
