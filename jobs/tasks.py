import logging
from django_rq import job
from django.conf import settings
from accounts.models import User
from alma.fee_loader import sync_fees_for_user

logger = logging.getLogger(__name__)


def eligible_user_ids():
    qs = User.objects.filter(is_active=True, yorku_id__isnull=False).exclude(yorku_id="")
    return list(qs.order_by("id").values_list("id", flat=True))


@job("default")
def kickoff_fee_sync():
    batch_size = settings.ALMA_SYNC_BATCH_SIZE
    ids = eligible_user_ids()
    logger.info("Queueing Alma fee sync for %d users", len(ids))
    for i in range(0, len(ids), batch_size):
        enqueue_batch_sync.delay(ids[i:i+batch_size])
    return len(ids)

@job("default")
def enqueue_batch_sync(user_ids: list[int]):
    for uid in user_ids:
        sync_user_fees.delay(uid)

@job("default")
def sync_user_fees(user_id: int):
    user = User.objects.get(pk=user_id)
    fees = sync_fees_for_user(user)
    return len(fees)
