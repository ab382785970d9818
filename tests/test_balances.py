import random
from decimal import Decimal
import pytest
from synsplit.core.balances import compute_balances, compute_debts, exclude_pool, pool_summary, POOL
from synsplit.schemas.balances import BalanceSummary
from synsplit.schemas.ledger import Member, LedgerExpense, LedgerContribution, LedgerSettlement

D = Decimal

A = Member(uid="A", name="Asha", photo_url="https://img/a.png")
B = Member(uid="B", name="Bilal")
C = Member(uid="C", name="Chen")

def by_uid(balances):
    return {b.uid: b for b in balances}

def balance(uid, net):
    return BalanceSummary(uid=uid, name=uid, total_paid=D("0"), total_used=D("0"), net_balance=D(net))

def settle(balances, debts):
    remaining = {b.uid: b.net_balance for b in balances}
    for d in debts:
        remaining[d.from_user] += d.amount
        remaining[d.to_user] -= d.amount
    return remaining

# --- Scenario: dinner for three, A pays 300 ---

def test_equal_split_three_members_scenario():
    expenses = [LedgerExpense(amount=D("300"), paid_by="A", used_by=["A", "B", "C"])]

    balances = compute_balances(expenses, [], [], [A, B, C])
    got = by_uid(balances)

    assert got["A"].total_paid == D("300.00")
    assert got["A"].total_used == D("100.00")
    assert got["A"].net_balance == D("200.00")
    assert got["B"].net_balance == D("-100.00")
    assert got["C"].net_balance == D("-100.00")

    debts = compute_debts(balances)
    assert [(d.from_user, d.to_user, d.amount) for d in debts] == [
        ("B", "A", D("100.00")),
        ("C", "A", D("100.00")),
    ]

def test_balances_carry_member_details_in_member_order():
    balances = compute_balances([], [], [], [C, A, B])
    assert [b.uid for b in balances] == ["C", "A", "B"]
    assert balances[1].name == "Asha"
    assert balances[1].photo_url == "https://img/a.png"
    assert all(b.net_balance == 0 for b in balances)

def test_rounding_residual_scenario():
    expenses = [LedgerExpense(amount=D("100.00"), paid_by="A", used_by=["A", "B", "C"])]
    got = by_uid(compute_balances(expenses, [], [], [A, B, C]))

    assert got["A"].total_used == D("33.34")
    assert got["B"].total_used == D("33.33")
    assert got["C"].total_used == D("33.33")
    assert sum(b.net_balance for b in got.values()) == 0

# --- Scenario: pool mode, A tops up the pool, the pool buys groceries ---

def test_pool_contribution_and_pool_expense_scenario():
    pool = Member(uid=POOL, name="Pool")
    contributions = [LedgerContribution(user_id="A", amount=D("500"))]
    expenses = [LedgerExpense(amount=D("200"), paid_by=POOL, used_by=["A", "B"])]

    got = by_uid(compute_balances(expenses, contributions, [], [A, B, pool]))

    assert got["A"].total_paid == D("500.00")
    assert got["A"].total_used == D("100.00")
    assert got["A"].net_balance == D("400.00")
    assert got["B"].net_balance == D("-100.00")
    assert got[POOL].total_paid == D("200.00")
    assert got[POOL].net_balance == D("200.00")

def test_pool_is_not_emitted_unless_listed():
    expenses = [LedgerExpense(amount=D("200"), paid_by=POOL, used_by=["A", "B"])]
    balances = compute_balances(expenses, [], [], [A, B])
    assert [b.uid for b in balances] == ["A", "B"]

def test_exclude_pool():
    balances = [balance("A", "10"), balance(POOL, "5"), balance("B", "-10")]
    assert [b.uid for b in exclude_pool(balances)] == ["A", "B"]

def test_pool_summary():
    contributions = [LedgerContribution(user_id="A", amount=D("500")), LedgerContribution(user_id="B", amount=D("250.50"))]
    expenses = [
        LedgerExpense(amount=D("200"), paid_by=POOL, used_by=["A", "B"]),
        LedgerExpense(amount=D("75"), paid_by="A", used_by=["A", "B"]),
    ]
    summary = pool_summary(expenses, contributions)
    assert summary.total_collected == D("750.50")
    assert summary.total_spent == D("200.00")
    assert summary.remaining == D("550.50")

def test_settlement_cancels_debt():
    expenses = [LedgerExpense(amount=D("300"), paid_by="A", used_by=["A", "B", "C"])]
    settlements = [LedgerSettlement(from_user="B", to_user="A", amount=D("100"))]

    balances = compute_balances(expenses, [], settlements, [A, B, C])
    got = by_uid(balances)

    assert got["B"].total_paid == D("100.00")
    assert got["B"].net_balance == D("0.00")
    assert got["A"].total_used == D("200.00")
    assert got["A"].net_balance == D("100.00")
    assert [(d.from_user, d.to_user, d.amount) for d in compute_debts(balances)] == [("C", "A", D("100.00"))]

def test_removed_member_history_does_not_break_balances():
    # C left the group, old expenses still reference C
    expenses = [LedgerExpense(amount=D("90"), paid_by="C", used_by=["A", "B", "C"])]
    got = by_uid(compute_balances(expenses, [], [], [A, B]))
    assert got["A"].net_balance == D("-30.00")
    assert got["B"].net_balance == D("-30.00")

def test_mixed_split_types():
    expenses = [
        LedgerExpense(amount=D("100"), paid_by="A", used_by=["A", "B"], split_type="percentage", split_details={"A": D("40"), "B": D("60")}),
        LedgerExpense(amount=D("60"), paid_by="B", used_by=["A", "B", "C"], split_type="share", split_details={"A": D("1"), "B": D("1"), "C": D("4")}),
        LedgerExpense(amount=D("50"), paid_by="C", used_by=["A", "C"], split_type="unequal", split_details={"A": D("20"), "C": D("30")}),
    ]
    got = by_uid(compute_balances(expenses, [], [], [A, B, C]))

    assert got["A"].total_used == D("70.00")
    assert got["B"].total_used == D("70.00")
    assert got["C"].total_used == D("70.00")
    assert got["A"].net_balance == D("30.00")
    assert got["B"].net_balance == D("-10.00")
    assert got["C"].net_balance == D("-20.00")

def test_unknown_split_type_in_history_is_equal():
    expenses = [LedgerExpense(amount=D("30"), paid_by="A", used_by=["A", "B", "C"], split_type="legacy")]
    got = by_uid(compute_balances(expenses, [], [], [A, B, C]))
    assert got["B"].net_balance == D("-10.00")

def test_percentage_mismatch_breaks_conservation():
    # known discrepancy: percentages summing to 50 leave half the cost unassigned
    expenses = [LedgerExpense(amount=D("100"), paid_by="A", used_by=["A", "B"], split_type="percentage", split_details={"A": D("25"), "B": D("25")})]
    balances = compute_balances(expenses, [], [], [A, B])
    assert sum(b.net_balance for b in balances) == D("50.00")

# --- Debt reduction ---

def test_no_debts_when_everyone_is_settled():
    assert compute_debts([balance("A", "0"), balance("B", "0.01"), balance("C", "-0.01")]) == []

def test_no_debts_without_creditors():
    assert compute_debts([balance("A", "-10"), balance("B", "-5")]) == []

def test_largest_debtor_pays_largest_creditor_first():
    balances = [balance("A", "30"), balance("B", "-10"), balance("C", "70"), balance("D", "-90")]
    debts = compute_debts(balances)
    assert [(d.from_user, d.to_user, d.amount) for d in debts] == [
        ("D", "C", D("70.00")),
        ("D", "A", D("20.00")),
        ("B", "A", D("10.00")),
    ]

def test_ties_keep_balance_order():
    debts = compute_debts([balance("B", "-50"), balance("A", "-50"), balance("C", "100")])
    assert [d.from_user for d in debts] == ["B", "A"]

    debts = compute_debts([balance("Y", "50"), balance("X", "50"), balance("Z", "-100")])
    assert [d.to_user for d in debts] == ["Y", "X"]

def test_cent_transfers_are_dropped():
    # B is one cent short after paying A, that cent is not worth a transfer
    debts = compute_debts([balance("A", "5.00"), balance("B", "-5.01"), balance("C", "0.01")])
    assert [(d.from_user, d.to_user, d.amount) for d in debts] == [("B", "A", D("5.00"))]

def _random_conserving_balances(rng, n):
    values = [D(rng.randint(-500, 500)) for _ in range(n - 1)]
    values.append(-sum(values, D("0")))
    return [balance(f"u{i}", v) for i, v in enumerate(values)]

@pytest.mark.parametrize("seed", range(25))
def test_debts_settle_every_balance(seed):
    rng = random.Random(seed)
    balances = _random_conserving_balances(rng, rng.randint(2, 12))

    remaining = settle(balances, compute_debts(balances))
    assert all(abs(v) <= D("0.01") for v in remaining.values())

@pytest.mark.parametrize("seed", range(25))
def test_debt_count_bound_and_no_self_debt(seed):
    rng = random.Random(seed)
    balances = [balance(f"u{i}", D(rng.randint(-50000, 50000)) / 100) for i in range(rng.randint(1, 15))]

    debtors = sum(1 for b in balances if b.net_balance < D("-0.01"))
    creditors = sum(1 for b in balances if b.net_balance > D("0.01"))
    debts = compute_debts(balances)

    assert len(debts) <= max(debtors + creditors - 1, 0)
    assert all(d.from_user != d.to_user for d in debts)
    assert all(d.amount > D("0.01") for d in debts)


def _cents_partition(rng, amount, parts):
    # split amount into `parts` non-negative cent amounts that add up exactly
    cents = int(amount * 100)
    cuts = sorted(rng.randint(0, cents) for _ in range(parts - 1))
    bounds = [0] + cuts + [cents]
    return [D(hi - lo) / 100 for lo, hi in zip(bounds, bounds[1:])]

def _random_expense(rng, uids, payers):
    used_by = rng.sample(uids, rng.randint(1, len(uids)))
    amount = D(rng.randint(1, 100000)) / 100
    paid_by = rng.choice(payers)

    if rng.random() < 0.5:
        return LedgerExpense(amount=amount, paid_by=paid_by, used_by=used_by)

    amounts = _cents_partition(rng, amount, len(used_by))
    return LedgerExpense(
        amount=amount, paid_by=paid_by, used_by=used_by,
        split_type="unequal", split_details=dict(zip(used_by, amounts)),
    )

@pytest.mark.parametrize("seed", range(25))
def test_balances_conserve_money(seed):
    rng = random.Random(seed)
    members = [Member(uid=f"u{i}", name=f"user {i}") for i in range(rng.randint(2, 8))]
    uids = [m.uid for m in members]

    expenses = [_random_expense(rng, uids, uids) for _ in range(rng.randint(1, 30))]

    settlements = [
        LedgerSettlement(from_user=f, to_user=t, amount=D(rng.randint(1, 5000)) / 100)
        for f, t in (rng.sample(uids, 2) for _ in range(rng.randint(0, 5)))
    ]

    balances = compute_balances(expenses, [], settlements, members)
    assert abs(sum(b.net_balance for b in balances)) <= D("0.02")

@pytest.mark.parametrize("seed", range(25))
def test_pool_balances_net_to_collected_funds(seed):
    # with "pool" listed, pool-paid spending nets out and only contributions remain
    rng = random.Random(seed)
    members = [Member(uid=f"u{i}", name=f"user {i}") for i in range(rng.randint(2, 6))]
    uids = [m.uid for m in members]
    members.append(Member(uid=POOL, name="Pool"))

    contributions = [
        LedgerContribution(user_id=rng.choice(uids), amount=D(rng.randint(1, 50000)) / 100)
        for _ in range(rng.randint(1, 6))
    ]
    expenses = [_random_expense(rng, uids, [POOL]) for _ in range(rng.randint(1, 20))]

    balances = compute_balances(expenses, contributions, [], members)
    collected = pool_summary(expenses, contributions).total_collected

    assert abs(sum(b.net_balance for b in balances) - collected) <= D("0.02")

@pytest.mark.parametrize("seed", range(40))
def test_weighted_splits_conserve_within_tolerance(seed):
    rng = random.Random(seed)
    members = [Member(uid=f"u{i}", name=f"user {i}") for i in range(4)]
    uids = [m.uid for m in members]

    # at most four participants, so at most four half-cent roundings
    used_by = rng.sample(uids, rng.randint(1, 4))
    amount = D(rng.randint(1, 100000)) / 100

    if seed % 2:
        cuts = sorted(rng.randint(0, 100) for _ in range(len(used_by) - 1))
        bounds = [0] + cuts + [100]
        details = {u: D(hi - lo) for u, (lo, hi) in zip(used_by, zip(bounds, bounds[1:]))}
        split_type = "percentage"
    else:
        details = {u: D(rng.randint(1, 9)) for u in used_by}
        split_type = "share"

    expense = LedgerExpense(amount=amount, paid_by=rng.choice(uids), used_by=used_by, split_type=split_type, split_details=details)
    balances = compute_balances([expense], [], [], members)

    assert abs(sum(b.net_balance for b in balances)) <= D("0.02")
