"""Model representing follower → following relationships."""

from django.conf import settings
from django.db import models
from django.db.models import F, Q


class Follow(models.Model):
    """Directed follow edge; two opposite edges make a mutual follow."""

    follower = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="following_edges",   # account.following_edges -> rows this account created (outbound)
        db_column="follower_id",
    )
    following = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="follower_edges",    # account.follower_edges -> rows pointing at this account (inbound)
        db_column="following_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB metadata and constraints for follow edges."""
        db_table = "follow"
        constraints = [
            models.UniqueConstraint(fields=["follower", "following"], name="uniq_follow_follower_following"),
            models.CheckConstraint(condition=~Q(follower=F("following")), name="chk_follow_not_self"),
        ]
        indexes = [
            models.Index(fields=["follower"], name="follow_follower_idx"),
            models.Index(fields=["following"], name="follow_following_idx"),
        ]

    def __str__(self) -> str:
        """Readable representation for admin/debugging."""
        return f"Follow(follower={self.follower_id}, following={self.following_id})"
