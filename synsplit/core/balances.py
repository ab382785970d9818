from collections import deque
from decimal import Decimal
from typing import Dict, Iterable, List
from synsplit.core.splits import resolve_split
from synsplit.core.utils import qround, to_decimal, CENTS, ZERO
from synsplit.schemas.balances import BalanceSummary, Debt, PoolSummary

POOL = "pool"

def compute_balances(expenses: Iterable, contributions: Iterable, settlements: Iterable, members: Iterable) -> List[BalanceSummary]:
    """
    Fold every monetary event of a group into per-member totals.

    Pool-paid expenses land on paid["pool"]; it only shows up in the result
    if the caller lists "pool" among the members.
    """
    members = list(members)
    paid: Dict[str, Decimal] = {}
    used: Dict[str, Decimal] = {}

    # 1. Start everyone at zero
    for m in members:
        paid[m.uid] = ZERO
        used[m.uid] = ZERO

    # 2. Expenses: payer fronts the full amount, participants use their share
    for exp in expenses:
        amount = qround(to_decimal(exp.amount))
        paid[exp.paid_by] = qround(paid.get(exp.paid_by, ZERO) + amount)

        shares = resolve_split(amount, exp.split_type, exp.used_by, exp.split_details)
        for uid, share in shares.items():
            used[uid] = qround(used.get(uid, ZERO) + share)

    # 3. Pool contributions count as paid
    for c in contributions:
        paid[c.user_id] = qround(paid.get(c.user_id, ZERO) + to_decimal(c.amount))

    # 4. Settlements: payer's debt shrinks, receiver's claim shrinks
    for s in settlements:
        amount = to_decimal(s.amount)
        paid[s.from_user] = qround(paid.get(s.from_user, ZERO) + amount)
        used[s.to_user] = qround(used.get(s.to_user, ZERO) + amount)

    return [
        BalanceSummary(
            uid=m.uid,
            name=m.name,
            photo_url=getattr(m, "photo_url", None),
            total_paid=qround(paid[m.uid]),
            total_used=qround(used[m.uid]),
            net_balance=qround(paid[m.uid] - used[m.uid]),
        )
        for m in members
    ]

def compute_debts(balances: Iterable) -> List[Debt]:
    """
    Greedy settle-up: biggest debtor pays biggest creditor until one side runs out.

    Balances within a cent of zero count as settled. Equal amounts keep the
    order they had in balances.
    """
    debtors = []
    creditors = []

    for b in balances:
        net = to_decimal(b.net_balance)
        if net < -CENTS:
            debtors.append([b.uid, -net])
        elif net > CENTS:
            creditors.append([b.uid, net])

    debtors.sort(key=lambda x: x[1], reverse=True)
    creditors.sort(key=lambda x: x[1], reverse=True)

    debtors = deque(debtors)
    creditors = deque(creditors)

    debts: List[Debt] = []

    while debtors and creditors:
        debtor = debtors[0]
        creditor = creditors[0]

        amount = min(debtor[1], creditor[1])
        if amount > CENTS:
            debts.append(Debt(from_user=debtor[0], to_user=creditor[0], amount=qround(amount)))

        debtor[1] -= amount
        creditor[1] -= amount

        if debtor[1] < CENTS:
            debtors.popleft()
        if creditor[1] < CENTS:
            creditors.popleft()

    return debts

def exclude_pool(balances: Iterable) -> list:
    return [b for b in balances if b.uid != POOL]

def pool_summary(expenses: Iterable, contributions: Iterable) -> PoolSummary:
    collected = sum((to_decimal(c.amount) for c in contributions), ZERO)
    spent = sum((to_decimal(e.amount) for e in expenses if e.paid_by == POOL), ZERO)

    return PoolSummary(
        total_collected=qround(collected),
        total_spent=qround(spent),
        remaining=qround(collected - spent),
    )
