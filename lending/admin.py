from django.contrib import admin
from payment.models import ScheduledRepayment
from .models import Loan


class ScheduledRepaymentInline(admin.TabularInline):
    model = ScheduledRepayment
    fields = ["due_date", "amount", "outstanding_amount", "currency_code", "status"]
    readonly_fields = fields
    extra = 0
    can_delete = False


@admin.register(Loan)
class LoanAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "user",
        "amount",
        "currency_code",
        "terms",
        "outstanding_amount",
        "status",
        "processed_at",
    ]
    list_filter = ["status", "currency_code"]
    readonly_fields = ["outstanding_amount", "status"]
    inlines = [ScheduledRepaymentInline]
