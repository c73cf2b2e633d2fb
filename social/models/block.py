"""Model representing blocker → blocked suppression edges."""

from django.conf import settings
from django.db import models
from django.db.models import F, Q


class Block(models.Model):
    """Hides everything `blocked` posts from `blocker`."""

    blocker = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blocks_created",
        db_column="blocker_id",
    )
    blocked = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blocks_received",
        db_column="blocked_id",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "block"
        constraints = [
            models.UniqueConstraint(fields=["blocker", "blocked"], name="uniq_block_blocker_blocked"),
            models.CheckConstraint(condition=~Q(blocker=F("blocked")), name="chk_block_not_self"),
        ]
        indexes = [
            models.Index(fields=["blocker"], name="block_blocker_idx"),
        ]

    def __str__(self) -> str:
        return f"Block(blocker={self.blocker_id}, blocked={self.blocked_id})"
