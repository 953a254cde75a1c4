from django.core.management.base import BaseCommand, CommandError
from accounts.models import User
from alma.models import Fee
from alma.client import get_user, get_univ_id_from_alma_user
from alma.fee_loader import sync_fees_for_user
import logging

logger = logging.getLogger(__name__)

class Command(BaseCommand):
    help = "Syncs patron fees from Alma to the local alma_fees table."

    def add_arguments(self, parser):
        parser.add_argument(
            "--user",
            action="append",
            dest="usernames",
            default=[],
            help="Only sync this username (Alma primary id). Repeatable.",
        )
        parser.add_argument(
            "--primary-id",
            help="Look the patron up in Alma, create the local user if needed, then sync.",
        )

    def handle(self, *args, **options):
        if options["primary_id"]:
            users = [self._local_user_for(options["primary_id"])]
        else:
            qs = User.objects.filter(is_active=True, yorku_id__isnull=False).exclude(yorku_id="")
            if options["usernames"]:
                qs = qs.filter(username__in=options["usernames"])
            users = list(qs.order_by("id"))

        self.stdout.write(f"Starting Alma fee sync for {len(users)} users...")

        synced = 0
        failed = 0
        fee_count = 0
        for user in users:
            try:
                fee_count += len(sync_fees_for_user(user))
                synced += 1
            except Exception as e:
                failed += 1
                self.stdout.write(self.style.ERROR(f"Error syncing {user.username}: {e}"))
                logger.exception("Alma fee sync failed for %s", user.username)

        self.stdout.write(
            self.style.SUCCESS(
                f"Synced {fee_count} fees for {synced} users ({failed} failed)."
            )
        )

    def _local_user_for(self, primary_id):
        alma_user = get_user(primary_id)
        univ_id = get_univ_id_from_alma_user(alma_user)
        if not univ_id:
            raise CommandError(f"Alma user {primary_id} has no university id")
        user, created = User.objects.get_or_create(
            username=alma_user.get("primary_id") or primary_id,
            defaults={"yorku_id": univ_id},
        )
        if created:
            user.set_unusable_password()
            user.save(update_fields=["password"])
        elif user.yorku_id != univ_id:
            user.yorku_id = univ_id
            user.save(update_fields=["yorku_id"])
            # yorku_id is denormalized onto every stored fee
            Fee.objects.filter(user_primary_id=user.username).update(yorku_id=univ_id)
        return user
