from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Optional
from synsplit.core.utils import qround, to_decimal, ZERO

UNEQUAL = "unequal"
PERCENTAGE = "percentage"
SHARE = "share"

def resolve_split(
    amount,
    split_type: str,
    participants: Iterable[str],
    split_details: Optional[Mapping[str, Any]] = None
) -> Dict[str, Decimal]:
    """
    Work out how much each participant owes for a single expense.

    Returns a uid -> owed amount map. Unknown split types fall back to an
    equal split and a missing split_details counts as empty, so this never
    raises on bad historical data.

    unequal and percentage details are taken as given: nothing checks that
    they add up to the amount (or to 100), the caller owns that.
    """
    amount = to_decimal(amount)
    details = split_details if isinstance(split_details, Mapping) else {}

    if split_type == UNEQUAL:
        return {uid: to_decimal(v) for uid, v in details.items()}
    if split_type == PERCENTAGE:
        return _percentage_split(amount, details)
    if split_type == SHARE:
        return _share_split(amount, details)

    return _equal_split(amount, participants)

def resolve_policy(amount, policy, participants: Iterable[str]) -> Dict[str, Decimal]:
    return resolve_split(amount, policy.split_type, participants, policy.split_details)

def _equal_split(amount: Decimal, participants: Iterable[str]) -> Dict[str, Decimal]:
    members = list(dict.fromkeys(participants or []))
    if not members:
        return {}

    share = qround(amount / len(members))
    result = {uid: share for uid in members}

    # rounding drift goes to the first participant
    diff = amount - share * len(members)
    if diff != 0:
        result[members[0]] = qround(result[members[0]] + diff)

    return result

def _percentage_split(amount: Decimal, percentages: Mapping[str, Any]) -> Dict[str, Decimal]:
    return {
        uid: qround(amount * to_decimal(pct) / 100)
        for uid, pct in percentages.items()
    }

def _share_split(amount: Decimal, shares: Mapping[str, Any]) -> Dict[str, Decimal]:
    units = {uid: to_decimal(s) for uid, s in shares.items()}
    total = sum(units.values(), ZERO)

    if total == 0:
        return {}

    return {
        uid: qround(amount * u / total)
        for uid, u in units.items()
    }
