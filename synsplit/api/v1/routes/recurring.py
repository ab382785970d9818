from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.dependencies import CurrentUser, get_current_user, require_membership
from synsplit.models.group import Group
from synsplit.schemas.expense import ExpenseOut
from synsplit.schemas.recurring import RecurringCreate, RecurringUpdate, RecurringOut
from synsplit.services.recurring_services import (
    add_recurring, list_recurring, toggle_recurring, delete_recurring, add_for_current_month
)

router = APIRouter()

@router.post("/groups/{group_id}/recurring", response_model=RecurringOut, status_code=201)
async def create(
    data: RecurringCreate,
    group: Group = Depends(require_membership),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await add_recurring(db, group, data, user.uid)

@router.get("/groups/{group_id}/recurring", response_model=list[RecurringOut])
async def fetch_recurring(group: Group = Depends(require_membership), db: AsyncSession = Depends(get_db)):
    return await list_recurring(db, group.id)

@router.patch("/recurring/{recurring_id}", response_model=RecurringOut)
async def toggle(
    recurring_id: int,
    data: RecurringUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await toggle_recurring(db, recurring_id, data, user.uid)

@router.delete("/recurring/{recurring_id}")
async def remove(recurring_id: int, db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    return await delete_recurring(db, recurring_id, user.uid)

@router.post("/recurring/{recurring_id}/add", response_model=ExpenseOut, status_code=201, description="book this month's expense")
async def add_this_month(recurring_id: int, db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    return await add_for_current_month(db, recurring_id, user.uid)
