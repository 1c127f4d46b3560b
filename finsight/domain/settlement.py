"""Family settlement - net balances and a short list of payments that clears them"""

import heapq
import math
from datetime import date
from typing import Dict, List, Sequence, Tuple

from finsight.domain.models import FamilyBalance, FamilyMonthSummary, FamilyTransfer, SettlementTransaction
from finsight.domain.thresholds import SETTLEMENT_EPSILON
from finsight.utils.date_utils import in_month


def calculate_family_balances(transfers: Sequence[FamilyTransfer]) -> List[FamilyBalance]:
    """
    Net each person's unsettled transfers: credits to `to_person`, debits to `from_person`.

    Positive balance = owed money, negative = owes money. Sorted by balance
    descending; people with equal balances keep first-seen order.
    """
    balances: Dict[str, float] = {}
    for t in transfers:
        if t.is_settled:
            continue
        balances[t.from_person] = balances.get(t.from_person, 0) - t.amount
        balances[t.to_person] = balances.get(t.to_person, 0) + t.amount

    result = [FamilyBalance(person=person, net_balance=net) for person, net in balances.items()]
    return sorted(result, key=lambda b: b.net_balance, reverse=True)


def _round_cents(amount: float) -> float:
    """Round to 2 decimals with halves going up (10.125 -> 10.13)"""
    return math.floor(amount * 100 + 0.5) / 100


def optimize_settlements(balances: Sequence[FamilyBalance]) -> List[SettlementTransaction]:
    """
    Greedy settlement: repeatedly match the largest creditor with the largest debtor.

    Each step pays min(creditor, debtor) from debtor to creditor (rounded to
    2 decimals) and drops anyone left within 0.01 of zero. Not guaranteed to
    be the theoretical minimum number of payments, but never more than
    (people - 1).
    """
    # Max-heaps keyed on outstanding amount; the index keeps ties in input order
    creditors: List[Tuple[float, int, str]] = []
    debtors: List[Tuple[float, int, str]] = []
    for index, b in enumerate(balances):
        if b.net_balance > 0:
            heapq.heappush(creditors, (-b.net_balance, index, b.person))
        elif b.net_balance < 0:
            heapq.heappush(debtors, (b.net_balance, index, b.person))

    settlements: List[SettlementTransaction] = []
    while creditors and debtors:
        credit_key, credit_index, creditor = heapq.heappop(creditors)
        debit_key, debit_index, debtor = heapq.heappop(debtors)
        owed = -credit_key
        owing = -debit_key

        amount = min(owed, owing)
        if amount > 0:
            settlements.append(
                SettlementTransaction(from_person=debtor, to_person=creditor, amount=_round_cents(amount))
            )

        owed -= amount
        owing -= amount
        if owed > SETTLEMENT_EPSILON:
            heapq.heappush(creditors, (-owed, credit_index, creditor))
        if owing > SETTLEMENT_EPSILON:
            heapq.heappush(debtors, (-owing, debit_index, debtor))

    return settlements


def summarize_family_month(transfers: Sequence[FamilyTransfer], as_of: date) -> FamilyMonthSummary:
    """Total and count of unsettled transfers dated in the month of `as_of`"""
    this_month = [
        t for t in transfers if not t.is_settled and t.transfer_date is not None and in_month(t.transfer_date, as_of)
    ]
    return FamilyMonthSummary(
        total=sum(t.amount for t in this_month),
        count=len(this_month),
        month=f"{as_of:%B %Y}",
    )
