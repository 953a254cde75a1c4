from django.conf import settings
from django.core.management.base import BaseCommand
from django_rq import get_scheduler
from jobs.tasks import kickoff_fee_sync

class Command(BaseCommand):
    help = "Apply the rq-scheduler cron schedule for the Alma fee sync"

    def handle(self, *args, **options):
        scheduler = get_scheduler("default")
        # Clear existing jobs for kickoff to avoid duplicates
        for job in scheduler.get_jobs():
            if job.func_name.endswith("kickoff_fee_sync"):
                scheduler.cancel(job)
        cron = settings.ALMA_FEE_SYNC_CRON
        scheduler.cron(cron, func=kickoff_fee_sync, repeat=None, queue_name="default")
        self.stdout.write(self.style.SUCCESS(f"Scheduled Alma fee sync with cron '{cron}'"))
