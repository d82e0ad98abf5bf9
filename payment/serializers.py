from rest_framework import serializers
from lending.models import Loan
from .models import ReceivedRepayment, ScheduledRepayment


class ScheduledRepaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = ScheduledRepayment
        fields = [
            "id",
            "loan",
            "amount",
            "outstanding_amount",
            "currency_code",
            "due_date",
            "status",
        ]
        read_only_fields = fields


class ReceivedRepaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = ReceivedRepayment
        fields = ["id", "loan", "amount", "currency_code", "received_at", "created_at"]
        read_only_fields = fields


class RepayLoanSerializer(serializers.Serializer):
    amount = serializers.IntegerField(min_value=1)
    currency_code = serializers.ChoiceField(choices=Loan.CURRENCY_CHOICES)
    received_at = serializers.DateTimeField()
