import logging
from pydantic import BaseModel
from fastapi import Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.db.session import get_db
from synsplit.core.jwt_config import decode_token, get_token_from_cookie
from synsplit.models.group import Group
from synsplit.models.group_member import GroupMember

logger = logging.getLogger(__name__)

class CurrentUser(BaseModel):
    uid: str
    name: str
    email: str | None = None
    photo_url: str | None = None

async def get_current_user(request: Request) -> CurrentUser:
    token = get_token_from_cookie(request=request)
    payload = decode_token(token)
    uid = payload.get("sub")

    if not uid:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    return CurrentUser(
        uid=str(uid),
        name=payload.get("name") or payload.get("email") or str(uid),
        email=payload.get("email"),
        photo_url=payload.get("picture"),
    )

async def get_group_or_404(db: AsyncSession, group_id: int) -> Group:
    res = await db.execute(select(Group).where(Group.id == group_id))
    group = res.scalar_one_or_none()

    if not group:
        raise HTTPException(404, "Group not found")

    return group

async def check_group_membership(db: AsyncSession, group_id: int, uid: str) -> Group:
    group = await get_group_or_404(db, group_id)

    q = select(GroupMember).where(
        GroupMember.group_id == group_id,
        GroupMember.uid == uid
    )
    res = await db.execute(q)

    if not res.scalar_one_or_none():
        logger.info("uid %s denied access to group %s", uid, group_id)
        raise HTTPException(403, "You are not a member of this group")

    return group

async def require_membership(
    group_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
) -> Group:
    return await check_group_membership(db, group_id, current_user.uid)
