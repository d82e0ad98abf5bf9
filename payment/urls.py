from django.urls import path
from .views import LoanRepaymentsView

urlpatterns = [
    path(
        "loans/<int:loan_id>/repayments/",
        LoanRepaymentsView.as_view(),
        name="loan-repayments",
    ),
]
