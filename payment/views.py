from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from lending.exceptions import InvalidArgumentError, PersistenceError
from lending.models import Loan
from lending.serializers import LoanSerializer
from .serializers import ReceivedRepaymentSerializer, RepayLoanSerializer
from .services import repay_loan


def _get_owned_loan(request, loan_id):
    try:
        return Loan.objects.get(id=loan_id, user=request.user)
    except Loan.DoesNotExist:
        return None


class LoanRepaymentsView(APIView):
    """
    Received repayments of a loan.

    GET returns the loan's ledger entries, newest first.

    POST records a repayment and allocates it to the schedule.
    Expected input:
    - amount: Amount received in minor currency units
    - currency_code: "VND", "SGD" or "USD"
    - received_at: Timestamp the money was received (ISO 8601)
    """

    def get(self, request, loan_id):
        loan = _get_owned_loan(request, loan_id)
        if loan is None:
            return Response(
                {"error": "Loan not found"}, status=status.HTTP_404_NOT_FOUND
            )

        serializer = ReceivedRepaymentSerializer(
            loan.received_repayments.all(), many=True
        )
        return Response(serializer.data)

    def post(self, request, loan_id):
        loan = _get_owned_loan(request, loan_id)
        if loan is None:
            return Response(
                {"error": "Loan not found"}, status=status.HTTP_404_NOT_FOUND
            )

        serializer = RepayLoanSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            loan = repay_loan(loan, **serializer.validated_data)
        except InvalidArgumentError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except PersistenceError:
            return Response(
                {"error": "Repayment could not be recorded, please retry"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(LoanSerializer(loan).data, status=status.HTTP_201_CREATED)
