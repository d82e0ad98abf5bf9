import logging

from django.db import DatabaseError, transaction

from lending.exceptions import PersistenceError
from lending.models import Loan
from lending.validation import as_aware_datetime, require_positive_int
from .allocation import allocate_repayment
from .models import ReceivedRepayment, ScheduledRepayment

logger = logging.getLogger(__name__)


def repay_loan(loan, amount, currency_code, received_at):
    """
    Record a repayment and apply it to the loan's schedule.

    The payment is written to the ledger first, then allocated to unpaid
    scheduled repayments in due-date order. The loan's outstanding amount is
    reduced by the full payment and clamped at zero, at which point the loan
    is repaid.

    The loan row is locked for the duration of the transaction and re-read,
    so ``loan`` may be a stale instance; only its primary key is used.

    Returns:
        Loan: The updated loan with ``scheduled_repayments`` prefetched

    Raises:
        InvalidArgumentError: If amount is not a positive integer or
            received_at is not a timestamp
        PersistenceError: If the write could not be committed
    """
    require_positive_int(amount, "amount")
    received_at = as_aware_datetime(received_at, "received_at")

    try:
        with transaction.atomic():
            locked_loan = Loan.objects.select_for_update().get(pk=loan.pk)

            ReceivedRepayment.objects.create(
                loan=locked_loan,
                amount=amount,
                currency_code=currency_code,
                received_at=received_at,
            )

            unpaid = list(
                locked_loan.scheduled_repayments.exclude(
                    status=ScheduledRepayment.STATUS_REPAID
                ).order_by("due_date", "id")
            )
            allocations, unallocated = allocate_repayment(unpaid, amount)

            for allocation in allocations:
                scheduled = allocation.scheduled_repayment
                scheduled.outstanding_amount = allocation.outstanding_amount
                scheduled.status = allocation.status

            if allocations:
                ScheduledRepayment.objects.bulk_update(
                    [allocation.scheduled_repayment for allocation in allocations],
                    ["outstanding_amount", "status"],
                )

            locked_loan.outstanding_amount = max(
                locked_loan.outstanding_amount - amount, 0
            )
            locked_loan.status = Loan.status_for(locked_loan.outstanding_amount)
            locked_loan.save(
                update_fields=["outstanding_amount", "status", "updated_at"]
            )
    except DatabaseError as e:
        logger.exception(
            "Could not apply repayment of %s to loan #%s", amount, loan.pk
        )
        raise PersistenceError(f"Repayment could not be applied: {e}") from e

    if unallocated:
        # TODO: settle the over-payment policy (reject, cap or credit) with the
        # product owner; until then the excess is only visible in this log.
        logger.warning(
            "Repayment of %s %s to loan #%s left %s unallocated",
            amount,
            currency_code,
            loan.pk,
            unallocated,
        )

    logger.info(
        "Applied repayment of %s %s to loan #%s: %s installment(s) touched, "
        "outstanding %s, status %s",
        amount,
        currency_code,
        loan.pk,
        len(allocations),
        locked_loan.outstanding_amount,
        locked_loan.status,
    )

    return Loan.objects.prefetch_related("scheduled_repayments").get(pk=loan.pk)
