import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Loan",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "amount",
                    models.PositiveIntegerField(
                        help_text="Principal in minor currency units"
                    ),
                ),
                ("currency_code", models.CharField(max_length=3)),
                (
                    "terms",
                    models.PositiveIntegerField(
                        help_text="Number of monthly installments"
                    ),
                ),
                ("processed_at", models.DateField()),
                ("outstanding_amount", models.PositiveIntegerField()),
                (
                    "status",
                    models.CharField(
                        choices=[("due", "Due"), ("repaid", "Repaid")],
                        default="due",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="loans",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-processed_at", "-id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("outstanding_amount__lte", models.F("amount"))
                        ),
                        name="loan_outstanding_within_amount",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(("outstanding_amount", 0), ("status", "repaid")),
                            models.Q(("outstanding_amount__gt", 0), ("status", "due")),
                            _connector="OR",
                        ),
                        name="loan_status_matches_outstanding",
                    ),
                ],
            },
        ),
    ]
