from django.core.management.base import BaseCommand

from social.services import LikeService


class Command(BaseCommand):
    """
    Rebuild Post.heart_count and Comment.like_count from the like rows.

    The counters are normally kept in step with the like tables inside the
    same transaction; this command repairs rows that drifted through manual
    edits or imports.
    """

    help = 'Recompute post and comment like counters from the like tables'

    def handle(self, *args, **options):
        posts_fixed, comments_fixed = LikeService().reconcile_counters()
        self.stdout.write(self.style.SUCCESS(
            f"Fixed {posts_fixed} post counters and {comments_fixed} comment counters."
        ))
