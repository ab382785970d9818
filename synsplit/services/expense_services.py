import logging
from datetime import timedelta
from decimal import Decimal
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
from synsplit.models.expense import Expense
from synsplit.models.group import Group
from synsplit.core.config import settings
from synsplit.core.balances import POOL
from synsplit.core.splits import resolve_split, resolve_policy
from synsplit.core.utils import amounts_close, as_utc, qround, utcnow
from synsplit.schemas.expense import ExpenseOut
from synsplit.services.group_services import get_member_uids

logger = logging.getLogger(__name__)

def expense_out(expense: Expense) -> ExpenseOut:
    out = ExpenseOut.model_validate(expense)
    out.shares = resolve_split(expense.amount, expense.split_type, expense.used_by, expense.split_details)
    return out

def _dump_details(policy):
    details = policy.split_details
    if details is None:
        return None
    # JSON column, keep the exact decimal text
    return {uid: str(v) for uid, v in details.items()}

def check_participants(used_by, members: set):
    # 1. Duplicates
    if len(used_by) != len(set(used_by)):
        raise HTTPException(400, "Duplicate users found in used_by")

    # 2. Everyone charged must belong to the group
    if not set(used_by) <= members:
        raise HTTPException(400, "Some users in used_by are not group members")

def check_split_keys(details, used_by):
    # used_by decides who is charged, split details only weight them
    if details and not set(details) <= set(used_by):
        raise HTTPException(400, "Split details name users outside used_by")

def _warn_on_mismatch(expense_id, amount: Decimal, shares: dict):
    # Totals are not enforced, only surfaced
    total = qround(sum(shares.values(), Decimal("0")))
    if not amounts_close(total, amount):
        logger.warning(
            "expense %s: resolved shares sum to %s but amount is %s",
            expense_id, total, amount
        )

def _resolve_payer(group: Group, paid_by: str | None, uid: str, members: set) -> str:
    if group.mode == "pool":
        if group.created_by != uid and not group.allow_member_expenses:
            raise HTTPException(403, "Only the group admin can add pool expenses")
        return POOL

    payer = paid_by or uid
    if payer not in members:
        raise HTTPException(400, "Payer is not a member of the group")
    return payer

async def create_expense(db: AsyncSession, group: Group, data, uid: str):
    members = await get_member_uids(db, group.id)

    paid_by = _resolve_payer(group, data.paid_by, uid, members)
    check_participants(data.used_by, members)
    check_split_keys(data.split.split_details, data.used_by)

    expense = Expense(
        group_id=group.id,
        amount=data.amount,
        description=data.description,
        category=data.category,
        mode=group.mode,
        paid_by=paid_by,
        used_by=list(data.used_by),
        split_type=data.split.split_type,
        split_details=_dump_details(data.split),
        created_by=uid,
        created_at=utcnow()
    )
    db.add(expense)
    group.updated_at = utcnow()

    await db.commit()
    await db.refresh(expense)

    shares = resolve_policy(data.amount, data.split, data.used_by)
    _warn_on_mismatch(expense.id, qround(data.amount), shares)

    logger.info("expense %s added to group %s by %s", expense.id, group.id, uid)
    return expense_out(expense)

async def _get_editable_expense(db: AsyncSession, expense_id: int, uid: str) -> Expense:
    q = select(Expense).where(Expense.id == expense_id)
    res = await db.execute(q)
    expense = res.scalar_one_or_none()

    if not expense:
        raise HTTPException(404, "Expense not found")

    # Authorization: only the creator, only inside the edit window
    if expense.created_by != uid:
        raise HTTPException(403, "You cannot modify this expense")

    window = timedelta(hours=settings.EDIT_WINDOW_HOURS)
    if utcnow() - as_utc(expense.created_at) >= window:
        raise HTTPException(403, f"Expenses can only be changed within {settings.EDIT_WINDOW_HOURS} hours")

    return expense

async def edit_expense(db: AsyncSession, expense_id: int, data, uid: str):
    expense = await _get_editable_expense(db, expense_id, uid)

    res = await db.execute(select(Group).where(Group.id == expense.group_id))
    group = res.scalar_one()
    members = await get_member_uids(db, group.id)

    # pool spending rights may have been withdrawn since the expense was added
    if expense.paid_by == POOL and group.created_by != uid and not group.allow_member_expenses:
        raise HTTPException(403, "Only the group admin can edit pool expenses")

    if data.amount is not None:
        expense.amount = data.amount

    if data.description is not None:
        expense.description = data.description

    if data.category is not None:
        expense.category = data.category

    if data.paid_by is not None and expense.paid_by != POOL:
        if data.paid_by not in members:
            raise HTTPException(400, "Payer is not a member of the group")
        expense.paid_by = data.paid_by

    if data.used_by is not None:
        check_participants(data.used_by, members)
        expense.used_by = list(data.used_by)

    if data.split is not None:
        expense.split_type = data.split.split_type
        expense.split_details = _dump_details(data.split)

    if data.used_by is not None or data.split is not None:
        check_split_keys(expense.split_details, expense.used_by)

    expense.edited_by = uid
    expense.edited_at = utcnow()

    await db.commit()
    await db.refresh(expense)

    out = expense_out(expense)
    _warn_on_mismatch(expense.id, qround(out.amount), out.shares)
    return out

async def delete_expense(db: AsyncSession, expense_id: int, uid: str):
    expense = await _get_editable_expense(db, expense_id, uid)

    await db.delete(expense)
    await db.commit()

    logger.info("expense %s deleted by %s", expense_id, uid)
    return {"status": "deleted"}

async def list_group_expenses(db: AsyncSession, group_id: int):
    q = (
        select(Expense)
        .where(Expense.group_id == group_id)
        .order_by(Expense.created_at.desc(), Expense.id.desc())
    )

    res = await db.execute(q)
    return [expense_out(e) for e in res.scalars().all()]
