from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.dependencies import CurrentUser, get_current_user, require_membership
from synsplit.models.group import Group
from synsplit.schemas.analytics import GroupAnalyticsOut
from synsplit.services.analytics_services import get_group_analytics

router = APIRouter()

@router.get("/groups/{group_id}/analytics", response_model=GroupAnalyticsOut)
async def group_analytics(
    group: Group = Depends(require_membership),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user)
):
    return await get_group_analytics(db, group, user.uid)
