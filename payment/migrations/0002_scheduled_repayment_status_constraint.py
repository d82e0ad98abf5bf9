from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("payment", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="scheduledrepayment",
            constraint=models.CheckConstraint(
                condition=models.Q(
                    models.Q(
                        ("outstanding_amount", models.F("amount")),
                        ("outstanding_amount__gt", 0),
                        ("status", "due"),
                    ),
                    models.Q(
                        ("outstanding_amount__gt", 0),
                        ("outstanding_amount__lt", models.F("amount")),
                        ("status", "partial"),
                    ),
                    models.Q(("outstanding_amount", 0), ("status", "repaid")),
                    _connector="OR",
                ),
                name="scheduled_repayment_status_matches_outstanding",
            ),
        ),
    ]
