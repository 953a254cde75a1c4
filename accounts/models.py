from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    # username carries the Alma primary id
    yorku_id = models.CharField(max_length=64, blank=True, null=True, db_index=True)

    @property
    def alma_fees(self):
        """Fees currently ACTIVE for this patron."""
        from alma.models import Fee

        if not self.yorku_id:
            return Fee.objects.none()
        return Fee.objects.active().filter(yorku_id=self.yorku_id)
