from decimal import Decimal
from typing import Dict, Iterable, List
from synsplit.core.balances import compute_balances
from synsplit.core.utils import as_utc, qround, to_decimal, ZERO
from synsplit.schemas.analytics import CategorySpend, MonthlySpend, PersonSpend, MemberStats

def total_spend(expenses: Iterable) -> Decimal:
    return qround(sum((to_decimal(e.amount) for e in expenses), ZERO))

def category_breakdown(expenses: Iterable) -> List[CategorySpend]:
    expenses = list(expenses)
    total = total_spend(expenses)

    spent: Dict[str, Decimal] = {}
    for e in expenses:
        spent[e.category] = qround(spent.get(e.category, ZERO) + to_decimal(e.amount))

    rows = sorted(spent.items(), key=lambda kv: kv[1], reverse=True)
    return [
        CategorySpend(
            category=category,
            amount=amount,
            percent=qround(amount * 100 / total) if total > 0 else ZERO,
        )
        for category, amount in rows
    ]

def monthly_spend(expenses: Iterable, months: int = 6) -> List[MonthlySpend]:
    """Spend per calendar month (UTC), oldest first, only the latest `months` that had any."""
    spent: Dict[str, Decimal] = {}
    for e in expenses:
        key = as_utc(e.created_at).strftime("%Y-%m")
        spent[key] = qround(spent.get(key, ZERO) + to_decimal(e.amount))

    keys = sorted(spent)[-months:] if months > 0 else []
    return [MonthlySpend(month=k, amount=spent[k]) for k in keys]

def person_breakdown(expenses: Iterable, members: Iterable) -> List[PersonSpend]:
    members = list(members)
    paid = {m.uid: ZERO for m in members}

    # pool-paid and former-member expenses are not anyone's here
    for e in expenses:
        if e.paid_by in paid:
            paid[e.paid_by] = qround(paid[e.paid_by] + to_decimal(e.amount))

    rows = [
        PersonSpend(uid=m.uid, name=m.name, photo_url=getattr(m, "photo_url", None), amount=paid[m.uid])
        for m in members
    ]
    return sorted(rows, key=lambda p: p.amount, reverse=True)

def member_stats(expenses: Iterable, contributions: Iterable, settlements: Iterable, members: Iterable, uid: str) -> MemberStats:
    expenses = list(expenses)
    members = [m for m in members if m.uid == uid]

    you_paid = qround(sum((to_decimal(e.amount) for e in expenses if e.paid_by == uid), ZERO))

    # same net figure the balances view shows
    balances = compute_balances(expenses, contributions, settlements, members)
    net = balances[0].net_balance if balances else qround(ZERO)

    return MemberStats(
        uid=uid,
        total_spend=total_spend(expenses),
        you_paid=you_paid,
        you_get=net if net > 0 else qround(ZERO),
        you_owe=-net if net < 0 else qround(ZERO),
    )
