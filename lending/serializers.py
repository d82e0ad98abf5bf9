from rest_framework import serializers
from payment.serializers import ScheduledRepaymentSerializer
from .models import Loan


class CreateLoanSerializer(serializers.Serializer):
    amount = serializers.IntegerField(min_value=1)
    currency_code = serializers.ChoiceField(choices=Loan.CURRENCY_CHOICES)
    terms = serializers.IntegerField(min_value=1)
    processed_at = serializers.DateField()


class LoanSerializer(serializers.ModelSerializer):
    owner_username = serializers.CharField(source="user.username", read_only=True)
    scheduled_repayments = ScheduledRepaymentSerializer(many=True, read_only=True)

    class Meta:
        model = Loan
        fields = [
            "id",
            "user",
            "owner_username",
            "amount",
            "currency_code",
            "terms",
            "processed_at",
            "outstanding_amount",
            "status",
            "created_at",
            "updated_at",
            "scheduled_repayments",
        ]
        read_only_fields = fields
