import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("lending", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ScheduledRepayment",
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
                ("amount", models.PositiveIntegerField()),
                ("outstanding_amount", models.PositiveIntegerField()),
                ("currency_code", models.CharField(max_length=3)),
                ("due_date", models.DateField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("due", "Due"),
                            ("partial", "Partial"),
                            ("repaid", "Repaid"),
                        ],
                        default="due",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "loan",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="scheduled_repayments",
                        to="lending.loan",
                    ),
                ),
            ],
            options={
                "ordering": ["due_date", "id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("outstanding_amount__lte", models.F("amount"))
                        ),
                        name="scheduled_repayment_outstanding_within_amount",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ReceivedRepayment",
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
                ("amount", models.PositiveIntegerField()),
                ("currency_code", models.CharField(max_length=3)),
                ("received_at", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "loan",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="received_repayments",
                        to="lending.loan",
                    ),
                ),
            ],
            options={
                "ordering": ["-received_at", "-id"],
            },
        ),
    ]
