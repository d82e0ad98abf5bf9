from django.db import models
from django.contrib.auth.models import User


class Loan(models.Model):
    STATUS_DUE = "due"
    STATUS_REPAID = "repaid"
    STATUS_CHOICES = [
        (STATUS_DUE, "Due"),
        (STATUS_REPAID, "Repaid"),
    ]

    # Accepted at the API boundary; the ledger itself records any code.
    CURRENCY_CHOICES = [("VND", "VND"), ("SGD", "SGD"), ("USD", "USD")]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="loans")
    amount = models.PositiveIntegerField(help_text="Principal in minor currency units")
    currency_code = models.CharField(max_length=3)
    terms = models.PositiveIntegerField(help_text="Number of monthly installments")
    processed_at = models.DateField()
    outstanding_amount = models.PositiveIntegerField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DUE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-processed_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(outstanding_amount__lte=models.F("amount")),
                name="loan_outstanding_within_amount",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(status="repaid", outstanding_amount=0)
                    | models.Q(status="due", outstanding_amount__gt=0)
                ),
                name="loan_status_matches_outstanding",
            ),
        ]

    @classmethod
    def status_for(cls, outstanding_amount):
        return cls.STATUS_REPAID if outstanding_amount == 0 else cls.STATUS_DUE

    def __str__(self):
        return (
            f"Loan #{self.id} - {self.amount} {self.currency_code} - {self.status}"
        )
