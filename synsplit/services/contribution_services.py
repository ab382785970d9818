from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from synsplit.models.group import Group
from synsplit.models.pool_contribution import PoolContribution
from synsplit.core.utils import utcnow

async def add_contribution(db: AsyncSession, group: Group, data, uid: str):
    if group.mode != "pool":
        raise HTTPException(400, "Contributions are only tracked for pool groups")

    now = utcnow()
    contribution = PoolContribution(
        group_id=group.id,
        user_id=uid,
        amount=data.amount,
        month=data.month or now.strftime("%Y-%m"),
        created_at=now
    )
    db.add(contribution)
    group.updated_at = now

    await db.commit()
    await db.refresh(contribution)
    return contribution

async def list_contributions(db: AsyncSession, group_id: int):
    q = (
        select(PoolContribution)
        .where(PoolContribution.group_id == group_id)
        .order_by(PoolContribution.created_at.desc(), PoolContribution.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()
