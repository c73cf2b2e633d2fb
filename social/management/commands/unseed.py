from django.core.management.base import BaseCommand
from django.db import transaction

from social.models import Account


class Command(BaseCommand):
    """
    Remove seeded data. Deletes every non-staff account; posts, edges, likes,
    comments, messages and notifications go with them through cascades.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted_count, _ = Account.objects.filter(is_staff=False).delete()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} rows belonging to non-staff accounts."))
