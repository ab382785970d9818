from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.dependencies import CurrentUser, get_current_user, require_membership
from synsplit.models.group import Group
from synsplit.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseOut
from synsplit.services.expense_services import create_expense, edit_expense, delete_expense, list_group_expenses

router = APIRouter()

@router.post("/groups/{group_id}/expenses", response_model=ExpenseOut, status_code=201)
async def add_expense(
    data: ExpenseCreate,
    group: Group = Depends(require_membership),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await create_expense(db, group, data, user.uid)

@router.get("/groups/{group_id}/expenses", response_model=list[ExpenseOut], description="get all expenses of the group")
async def fetch_expenses(group: Group = Depends(require_membership), db: AsyncSession = Depends(get_db)):
    return await list_group_expenses(db, group.id)

@router.patch("/expenses/{expense_id}", response_model=ExpenseOut)
async def edit(
    expense_id: int,
    data: ExpenseUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await edit_expense(db, expense_id, data, user.uid)

@router.delete("/expenses/{expense_id}")
async def del_expense(expense_id: int, db: AsyncSession = Depends(get_db), user: CurrentUser = Depends(get_current_user)):
    return await delete_expense(db, expense_id, user.uid)
