from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from .exceptions import InvalidArgumentError, PersistenceError
from .models import Loan
from .serializers import CreateLoanSerializer, LoanSerializer
from .services import create_loan


class LoansView(APIView):
    """
    List the caller's loans or issue a new one.

    Expected input (POST):
    - amount: Principal in minor currency units
    - currency_code: "VND", "SGD" or "USD"
    - terms: Number of monthly installments
    - processed_at: Processing date (YYYY-MM-DD)

    A new loan is returned with its repayment schedule.
    """

    def get(self, request):
        loans = Loan.objects.filter(user=request.user).prefetch_related(
            "scheduled_repayments"
        )
        serializer = LoanSerializer(loans, many=True)
        return Response(serializer.data)

    def post(self, request):
        serializer = CreateLoanSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            loan = create_loan(request.user, **serializer.validated_data)
        except InvalidArgumentError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except PersistenceError:
            return Response(
                {"error": "Loan could not be created, please retry"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(LoanSerializer(loan).data, status=status.HTTP_201_CREATED)


class LoanDetailView(APIView):
    """
    Retrieve one of the caller's loans including its repayment schedule.
    """

    def get(self, request, loan_id):
        try:
            loan = Loan.objects.prefetch_related("scheduled_repayments").get(
                id=loan_id, user=request.user
            )
        except Loan.DoesNotExist:
            return Response(
                {"error": "Loan not found"}, status=status.HTTP_404_NOT_FOUND
            )

        return Response(LoanSerializer(loan).data)
