import logging
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from synsplit.models.group import Group
from synsplit.models.group_member import GroupMember
from synsplit.models.expense import Expense
from synsplit.models.pool_contribution import PoolContribution
from synsplit.models.settlement import Settlement
from synsplit.models.recurring_expense import RecurringExpense
from synsplit.core.dependencies import CurrentUser, get_group_or_404
from synsplit.core.utils import utcnow

logger = logging.getLogger(__name__)

async def create_group(db: AsyncSession, name: str, mode: str, creator: CurrentUser):
    group = Group(name=name, mode=mode, created_by=creator.uid, allow_member_expenses=False)
    db.add(group)
    await db.flush()

    # creator is the admin and the first member
    member = GroupMember(
        group_id=group.id,
        uid=creator.uid,
        name=creator.name,
        email=creator.email,
        photo_url=creator.photo_url
    )
    db.add(member)

    await db.commit()
    await db.refresh(group)

    logger.info("group %s created by %s in %s mode", group.id, creator.uid, mode)
    return group

async def delete_group(db: AsyncSession, group_id: int, uid: str):
    group = await get_group_or_404(db, group_id)

    if group.created_by != uid:
        raise HTTPException(403, "Only group admin can delete the group")

    for model in (Expense, RecurringExpense, PoolContribution, Settlement, GroupMember):
        await db.execute(delete(model).where(model.group_id == group_id))

    await db.delete(group)
    await db.commit()

    logger.info("group %s deleted by %s", group_id, uid)
    return {"status": "deleted"}

async def edit_group(db: AsyncSession, group_id: int, uid: str, data):
    group = await get_group_or_404(db, group_id)

    if group.created_by != uid:
        raise HTTPException(403, "Only group admin can edit group")

    if data.name:
        group.name = data.name

    if data.mode:
        group.mode = data.mode

    if data.allow_member_expenses is not None:
        group.allow_member_expenses = data.allow_member_expenses

    group.updated_at = utcnow()

    await db.commit()
    await db.refresh(group)
    return group

async def add_member(db: AsyncSession, group_id: int, data, admin_uid: str):
    group = await get_group_or_404(db, group_id)

    if group.created_by != admin_uid:
        raise HTTPException(403, "Only the group admin can add members")

    check_q = select(GroupMember).where(
        GroupMember.group_id == group_id,
        GroupMember.uid == data.uid
    )
    existing = await db.execute(check_q)

    if existing.scalar_one_or_none():
        raise HTTPException(400, "User already exist in this group")

    new_member = GroupMember(
        group_id=group_id,
        uid=data.uid,
        name=data.name,
        email=data.email,
        photo_url=data.photo_url
    )
    db.add(new_member)
    group.updated_at = utcnow()

    await db.commit()
    await db.refresh(new_member)
    return new_member

async def remove_member(db: AsyncSession, group_id: int, uid: str, admin_uid: str):
    # Past expenses keep the uid, balances still show up for whoever stays
    group = await get_group_or_404(db, group_id)

    if group.created_by != admin_uid:
        raise HTTPException(403, "Only group admin can remove members")

    if uid == admin_uid:
        raise HTTPException(400, "Transfer admin role before removing yourself")

    res = await db.execute(
        select(GroupMember).where(
            GroupMember.group_id == group_id,
            GroupMember.uid == uid
        )
    )
    member = res.scalar_one_or_none()

    if not member:
        raise HTTPException(404, "User is not a member of this group")

    await db.delete(member)
    group.updated_at = utcnow()
    await db.commit()

    return {"status": "member_removed"}

async def exit_group(db: AsyncSession, group_id: int, uid: str):
    group = await get_group_or_404(db, group_id)

    if group.created_by == uid:
        raise HTTPException(400, "Group admin cannot exit. Transfer admin role first.")

    res_mem = await db.execute(
        select(GroupMember).where(
            GroupMember.group_id == group_id,
            GroupMember.uid == uid
        )
    )
    member = res_mem.scalar_one_or_none()

    if not member:
        raise HTTPException(404, "You are not a member of this group")

    await db.delete(member)
    await db.commit()

    return {"status": "exited_group"}

async def list_group_for_user(db: AsyncSession, uid: str):
    q = (
        select(Group)
        .join(GroupMember, GroupMember.group_id == Group.id)
        .where(GroupMember.uid == uid)
        .order_by(Group.updated_at.desc(), Group.id.desc())
    )
    result = await db.execute(q)
    return result.scalars().all()

async def list_group_members(db: AsyncSession, group_id: int):
    q = (
        select(GroupMember)
        .where(GroupMember.group_id == group_id)
        .order_by(GroupMember.id)
    )
    result = await db.execute(q)
    return result.scalars().all()

async def get_member_uids(db: AsyncSession, group_id: int) -> set:
    res = await db.execute(select(GroupMember.uid).where(GroupMember.group_id == group_id))
    return set(res.scalars().all())
