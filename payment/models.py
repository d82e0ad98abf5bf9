from django.db import models
from lending.exceptions import ImmutableLedgerEntryError
from lending.models import Loan


class ScheduledRepayment(models.Model):
    STATUS_DUE = "due"
    STATUS_PARTIAL = "partial"
    STATUS_REPAID = "repaid"
    STATUS_CHOICES = [
        (STATUS_DUE, "Due"),
        (STATUS_PARTIAL, "Partial"),
        (STATUS_REPAID, "Repaid"),
    ]

    loan = models.ForeignKey(
        Loan, on_delete=models.CASCADE, related_name="scheduled_repayments"
    )
    amount = models.PositiveIntegerField()
    outstanding_amount = models.PositiveIntegerField()
    currency_code = models.CharField(max_length=3)
    due_date = models.DateField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DUE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["due_date", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(outstanding_amount__lte=models.F("amount")),
                name="scheduled_repayment_outstanding_within_amount",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(
                        status="due",
                        outstanding_amount=models.F("amount"),
                        outstanding_amount__gt=0,
                    )
                    | models.Q(
                        status="partial",
                        outstanding_amount__gt=0,
                        outstanding_amount__lt=models.F("amount"),
                    )
                    | models.Q(status="repaid", outstanding_amount=0)
                ),
                name="scheduled_repayment_status_matches_outstanding",
            ),
        ]

    @classmethod
    def status_for(cls, amount, outstanding_amount):
        # A zero-amount installment owes nothing and is settled from the start
        if outstanding_amount == 0:
            return cls.STATUS_REPAID
        if outstanding_amount < amount:
            return cls.STATUS_PARTIAL
        return cls.STATUS_DUE

    def __str__(self):
        return f"Repayment due {self.due_date} for Loan #{self.loan_id} - {self.status}"


class ReceivedRepayment(models.Model):
    """Append-only ledger entry for money received against a loan."""

    loan = models.ForeignKey(
        Loan, on_delete=models.CASCADE, related_name="received_repayments"
    )
    amount = models.PositiveIntegerField()
    currency_code = models.CharField(max_length=3)
    received_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-received_at", "-id"]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableLedgerEntryError(
                f"Received repayment #{self.pk} cannot be modified"
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableLedgerEntryError(
            f"Received repayment #{self.pk} cannot be deleted"
        )

    def __str__(self):
        return f"Received {self.amount} {self.currency_code} for Loan #{self.loan_id}"
