from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.dependencies import get_current_user, require_membership
from synsplit.models.group import Group
from synsplit.schemas.balances import GroupBalanceOut
from synsplit.schemas.ledger import LedgerSnapshot, LedgerOut
from synsplit.services.balance_services import get_group_balances, compute_ledger

router = APIRouter()

@router.get("/groups/{group_id}/balances", response_model=GroupBalanceOut)
async def group_balances(group: Group = Depends(require_membership), db: AsyncSession = Depends(get_db)):
    return await get_group_balances(db, group)

@router.post("/ledger/compute", response_model=LedgerOut, dependencies=[Depends(get_current_user)])
async def compute(snapshot: LedgerSnapshot):
    return compute_ledger(snapshot)
