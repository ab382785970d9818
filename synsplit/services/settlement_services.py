import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from synsplit.models.group import Group
from synsplit.models.settlement import Settlement
from synsplit.core.utils import utcnow
from synsplit.services.group_services import get_member_uids

logger = logging.getLogger(__name__)

async def add_settlement(db: AsyncSession, group: Group, data, uid: str):
    from_user = data.from_user or uid

    if from_user == data.to_user:
        raise HTTPException(400, "Cannot settle with yourself")

    members = await get_member_uids(db, group.id)
    if from_user not in members or data.to_user not in members:
        raise HTTPException(400, "Both sides of a settlement must be group members")

    settlement = Settlement(
        group_id=group.id,
        from_user=from_user,
        to_user=data.to_user,
        amount=data.amount,
        created_at=utcnow()
    )
    db.add(settlement)
    group.updated_at = utcnow()

    await db.commit()
    await db.refresh(settlement)

    logger.info(
        "settlement %s recorded in group %s: %s -> %s %s",
        settlement.id, group.id, from_user, data.to_user, data.amount
    )
    return settlement

async def get_settlement_history(db: AsyncSession, group_id: int):
    q = (
        select(Settlement)
        .where(Settlement.group_id == group_id)
        .order_by(Settlement.created_at.desc(), Settlement.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()
