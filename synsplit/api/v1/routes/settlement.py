from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.dependencies import CurrentUser, get_current_user, require_membership
from synsplit.models.group import Group
from synsplit.schemas.settlements import SettlementCreate, SettlementOut
from synsplit.services.settlement_services import add_settlement, get_settlement_history

router = APIRouter()

@router.post("/{group_id}/settlements", response_model=SettlementOut, status_code=201)
async def add_manual_settlement(
    data: SettlementCreate,
    group: Group = Depends(require_membership),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await add_settlement(db, group, data, user.uid)

@router.get("/{group_id}/settlements", response_model=list[SettlementOut])
async def fetch_history(group: Group = Depends(require_membership), db: AsyncSession = Depends(get_db)):
    return await get_settlement_history(db, group.id)
