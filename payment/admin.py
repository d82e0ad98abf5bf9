from django.contrib import admin
from .models import ReceivedRepayment, ScheduledRepayment


@admin.register(ScheduledRepayment)
class ScheduledRepaymentAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "loan",
        "amount",
        "outstanding_amount",
        "due_date",
        "status",
    ]
    list_filter = ["status"]
    ordering = ["loan", "due_date"]
    readonly_fields = ["amount", "outstanding_amount", "status"]


@admin.register(ReceivedRepayment)
class ReceivedRepaymentAdmin(admin.ModelAdmin):
    list_display = ["id", "loan", "amount", "currency_code", "received_at"]
    ordering = ["loan", "-received_at"]

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
