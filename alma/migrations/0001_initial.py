from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Fee",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("fee_id", models.CharField(db_index=True, max_length=64)),
                ("user_primary_id", models.CharField(max_length=64)),
                ("yorku_id", models.CharField(db_index=True, max_length=64)),
                ("fee_type", models.CharField(blank=True, max_length=64, null=True)),
                ("fee_description", models.CharField(blank=True, max_length=255, null=True)),
                ("fee_status", models.CharField(db_index=True, max_length=32)),
                ("balance", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("remaining_vat_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("original_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("original_vat_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("creation_time", models.DateTimeField(blank=True, null=True)),
                ("status_time", models.DateTimeField(blank=True, null=True)),
                ("owner_id", models.CharField(blank=True, max_length=64, null=True)),
                ("owner_description", models.CharField(blank=True, max_length=255, null=True)),
                ("item_title", models.TextField(blank=True, null=True)),
                ("item_barcode", models.CharField(blank=True, max_length=64, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "alma_fees",
            },
        ),
        migrations.AddConstraint(
            model_name="fee",
            constraint=models.UniqueConstraint(fields=("fee_id", "user_primary_id"), name="alma_fee_per_user"),
        ),
    ]
