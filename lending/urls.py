from django.urls import path
from .views import LoansView, LoanDetailView

urlpatterns = [
    path("loans/", LoansView.as_view(), name="loans"),
    path("loans/<int:loan_id>/", LoanDetailView.as_view(), name="loan-detail"),
]
