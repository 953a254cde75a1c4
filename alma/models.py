from django.db import models


class FeeQuerySet(models.QuerySet):
    def active(self):
        return self.filter(fee_status=Fee.STATUS_ACTIVE)


class Fee(models.Model):
    STATUS_ACTIVE = "ACTIVE"
    STATUS_STALE = "STALE"
    STATUS_PAID = "PAID"

    fee_id = models.CharField(max_length=64, db_index=True)
    user_primary_id = models.CharField(max_length=64)
    yorku_id = models.CharField(max_length=64, db_index=True)

    fee_type = models.CharField(max_length=64, blank=True, null=True)
    fee_description = models.CharField(max_length=255, blank=True, null=True)
    fee_status = models.CharField(max_length=32, db_index=True)

    balance = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    remaining_vat_amount = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    original_amount = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    original_vat_amount = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)

    creation_time = models.DateTimeField(blank=True, null=True)
    status_time = models.DateTimeField(blank=True, null=True)

    owner_id = models.CharField(max_length=64, blank=True, null=True)
    owner_description = models.CharField(max_length=255, blank=True, null=True)

    item_title = models.TextField(blank=True, null=True)
    item_barcode = models.CharField(max_length=64, blank=True, null=True)

    updated_at = models.DateTimeField(auto_now=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = FeeQuerySet.as_manager()

    class Meta:
        db_table = "alma_fees"
        constraints = [
            models.UniqueConstraint(
                fields=["fee_id", "user_primary_id"], name="alma_fee_per_user"
            ),
        ]

    def __str__(self):
        return f"{self.fee_id} {self.fee_status} ({self.user_primary_id})"
