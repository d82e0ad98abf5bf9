from collections import namedtuple

from .models import ScheduledRepayment

Allocation = namedtuple(
    "Allocation", ["scheduled_repayment", "outstanding_amount", "status"]
)


def allocate_repayment(scheduled_repayments, amount):
    """
    Spread ``amount`` over scheduled repayments, earliest due first.

    ``scheduled_repayments`` must already be ordered by due date and contain
    no repaid rows. Nothing is mutated here.

    Returns:
        tuple: (list of Allocation for every row the amount reached,
                amount left over once all rows are settled)
    """
    remaining = amount
    allocations = []

    for scheduled in scheduled_repayments:
        if remaining <= 0:
            break

        owed = scheduled.outstanding_amount
        paid = min(remaining, owed)
        left = owed - paid
        allocations.append(
            Allocation(
                scheduled, left, ScheduledRepayment.status_for(scheduled.amount, left)
            )
        )
        remaining -= paid

    return allocations, remaining
