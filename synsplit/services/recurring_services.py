import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from synsplit.models.group import Group
from synsplit.models.recurring_expense import RecurringExpense
from synsplit.core.dependencies import check_group_membership
from synsplit.core.utils import utcnow
from synsplit.schemas.expense import ExpenseCreate, EqualSplit
from synsplit.services.expense_services import check_participants, create_expense
from synsplit.services.group_services import get_member_uids, list_group_members

logger = logging.getLogger(__name__)

async def add_recurring(db: AsyncSession, group: Group, data, uid: str):
    if data.used_by is None:
        used_by = [m.uid for m in await list_group_members(db, group.id)]
    else:
        used_by = list(data.used_by)
        check_participants(used_by, await get_member_uids(db, group.id))

    recurring = RecurringExpense(
        group_id=group.id,
        amount=data.amount,
        description=data.description.strip(),
        category=data.category,
        day_of_month=data.day_of_month,
        used_by=used_by,
        created_by=uid,
        created_at=utcnow(),
        active=True
    )
    db.add(recurring)

    await db.commit()
    await db.refresh(recurring)

    logger.info("recurring expense %s added to group %s by %s", recurring.id, group.id, uid)
    return recurring

async def list_recurring(db: AsyncSession, group_id: int):
    q = (
        select(RecurringExpense)
        .where(RecurringExpense.group_id == group_id)
        .order_by(RecurringExpense.created_at.desc(), RecurringExpense.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()

async def _get_recurring(db: AsyncSession, recurring_id: int, uid: str):
    res = await db.execute(select(RecurringExpense).where(RecurringExpense.id == recurring_id))
    recurring = res.scalar_one_or_none()

    if not recurring:
        raise HTTPException(404, "Recurring expense not found")

    group = await check_group_membership(db, recurring.group_id, uid)
    return recurring, group

async def _get_managed_recurring(db: AsyncSession, recurring_id: int, uid: str):
    recurring, group = await _get_recurring(db, recurring_id, uid)

    # creator or group admin
    if uid not in (recurring.created_by, group.created_by):
        raise HTTPException(403, "You cannot modify this recurring expense")

    return recurring

async def toggle_recurring(db: AsyncSession, recurring_id: int, data, uid: str):
    recurring = await _get_managed_recurring(db, recurring_id, uid)
    recurring.active = data.active

    await db.commit()
    await db.refresh(recurring)
    return recurring

async def delete_recurring(db: AsyncSession, recurring_id: int, uid: str):
    recurring = await _get_managed_recurring(db, recurring_id, uid)

    await db.delete(recurring)
    await db.commit()

    logger.info("recurring expense %s deleted by %s", recurring_id, uid)
    return {"status": "deleted"}

async def add_for_current_month(db: AsyncSession, recurring_id: int, uid: str):
    """
    Book this month's expense from a recurring template.

    Each template books at most once per calendar month. Members who have
    left the group since the template was made are dropped from the split.
    """
    recurring, group = await _get_recurring(db, recurring_id, uid)

    if not recurring.active:
        raise HTTPException(400, "Recurring expense is paused")

    month_key = utcnow().strftime("%Y-%m")
    if recurring.last_added == month_key:
        raise HTTPException(409, f"Already added for {month_key}")

    members = await get_member_uids(db, group.id)
    used_by = [u for u in recurring.used_by if u in members]
    if not used_by:
        raise HTTPException(400, "Nobody in this recurring expense is still a member")

    data = ExpenseCreate(
        amount=recurring.amount,
        description=recurring.description,
        category=recurring.category,
        used_by=used_by,
        split=EqualSplit()
    )

    # committed together with the expense
    recurring.last_added = month_key
    return await create_expense(db, group, data, uid)
