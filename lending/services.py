import logging

from django.db import DatabaseError, transaction

from payment.models import ScheduledRepayment
from .exceptions import PersistenceError
from .models import Loan
from .schedule import build_schedule
from .validation import as_date, require_positive_int

logger = logging.getLogger(__name__)


def create_loan(user, amount, currency_code, terms, processed_at):
    """
    Issue a loan and its monthly repayment schedule.

    The loan and all of its scheduled repayments are written in one
    transaction: either every row exists or none does.

    Args:
        user (User): Owner of the loan
        amount (int): Principal in minor currency units
        currency_code (str): Currency of the loan, copied to each installment
        terms (int): Number of monthly installments
        processed_at (date | datetime | str): Processing date; the first
            installment falls due one month later

    Returns:
        Loan: The new loan with ``scheduled_repayments`` prefetched

    Raises:
        InvalidArgumentError: If amount or terms is not a positive integer,
            or processed_at is not a date
        PersistenceError: If the write could not be committed
    """
    require_positive_int(amount, "amount")
    require_positive_int(terms, "terms")
    processed_at = as_date(processed_at, "processed_at")

    schedule = build_schedule(amount, terms, processed_at)

    try:
        with transaction.atomic():
            loan = Loan.objects.create(
                user=user,
                amount=amount,
                currency_code=currency_code,
                terms=terms,
                processed_at=processed_at,
                outstanding_amount=amount,
                status=Loan.STATUS_DUE,
            )

            ScheduledRepayment.objects.bulk_create(
                [
                    ScheduledRepayment(
                        loan=loan,
                        amount=installment_amount,
                        outstanding_amount=installment_amount,
                        currency_code=currency_code,
                        due_date=due_date,
                        status=ScheduledRepayment.status_for(
                            installment_amount, installment_amount
                        ),
                    )
                    for installment_amount, due_date in schedule
                ]
            )
    except DatabaseError as e:
        logger.exception(
            "Could not issue loan of %s %s for user %s", amount, currency_code, user.pk
        )
        raise PersistenceError(f"Loan could not be issued: {e}") from e

    logger.info(
        "Issued loan #%s: %s %s over %s terms for user %s",
        loan.id,
        amount,
        currency_code,
        terms,
        user.pk,
    )

    return Loan.objects.prefetch_related("scheduled_repayments").get(pk=loan.pk)
