from sqlalchemy.ext.asyncio import AsyncSession
from synsplit.models.group import Group
from synsplit.core.analytics import category_breakdown, monthly_spend, person_breakdown, member_stats, total_spend
from synsplit.core.balances import pool_summary
from synsplit.core.utils import qround, to_decimal, ZERO
from synsplit.schemas.analytics import GroupAnalyticsOut
from synsplit.services.balance_services import load_snapshot

async def get_group_analytics(db: AsyncSession, group: Group, uid: str) -> GroupAnalyticsOut:
    expenses, contributions, settlements, members = await load_snapshot(db, group.id)

    return GroupAnalyticsOut(
        total_spend=total_spend(expenses),
        total_contributions=qround(sum((to_decimal(c.amount) for c in contributions), ZERO)),
        categories=category_breakdown(expenses),
        monthly=monthly_spend(expenses),
        people=person_breakdown(expenses, members),
        you=member_stats(expenses, contributions, settlements, members, uid),
        pool=pool_summary(expenses, contributions) if group.mode == "pool" else None,
    )
