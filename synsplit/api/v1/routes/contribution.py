from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.dependencies import CurrentUser, get_current_user, require_membership
from synsplit.models.group import Group
from synsplit.schemas.contribution import ContributionCreate, ContributionOut
from synsplit.services.contribution_services import add_contribution, list_contributions

router = APIRouter()

@router.post("/{group_id}/contributions", response_model=ContributionOut, status_code=201)
async def contribute(
    data: ContributionCreate,
    group: Group = Depends(require_membership),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await add_contribution(db, group, data, user.uid)

@router.get("/{group_id}/contributions", response_model=list[ContributionOut])
async def fetch_contributions(group: Group = Depends(require_membership), db: AsyncSession = Depends(get_db)):
    return await list_contributions(db, group.id)
