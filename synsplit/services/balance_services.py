from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.models.expense import Expense
from synsplit.models.group import Group
from synsplit.models.pool_contribution import PoolContribution
from synsplit.models.settlement import Settlement
from synsplit.core.balances import compute_balances, compute_debts, exclude_pool, pool_summary
from synsplit.schemas.balances import GroupBalanceOut
from synsplit.services.group_services import list_group_members

async def load_snapshot(db: AsyncSession, group_id: int):
    members = await list_group_members(db, group_id)

    expenses = await db.execute(select(Expense).where(Expense.group_id == group_id).order_by(Expense.id))
    contributions = await db.execute(select(PoolContribution).where(PoolContribution.group_id == group_id).order_by(PoolContribution.id))
    settlements = await db.execute(select(Settlement).where(Settlement.group_id == group_id).order_by(Settlement.id))

    return (
        expenses.scalars().all(),
        contributions.scalars().all(),
        settlements.scalars().all(),
        members,
    )

async def get_group_balances(db: AsyncSession, group: Group) -> GroupBalanceOut:
    expenses, contributions, settlements, members = await load_snapshot(db, group.id)

    balances = exclude_pool(compute_balances(expenses, contributions, settlements, members))
    debts = compute_debts(balances)

    pool = pool_summary(expenses, contributions) if group.mode == "pool" else None

    return GroupBalanceOut(balances=balances, debts=debts, pool=pool)

def compute_ledger(snapshot):
    balances = compute_balances(snapshot.expenses, snapshot.contributions, snapshot.settlements, snapshot.members)
    return {"balances": balances, "debts": compute_debts(exclude_pool(balances))}
