"""Model for comments on posts, threaded through `parent`."""

from django.conf import settings
from django.db import models

from .post import Post


class Comment(models.Model):
    """Account-authored comment on a post, optionally replying to another comment."""

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        db_column='post_id',
        related_name='comments'
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='author_id',
        related_name='comments'
    )
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        db_column='parent_id',
        related_name='replies'
    )

    content = models.TextField(max_length=2000)
    like_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB table name for comments."""
        db_table = "comment"

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Comment by {self.author_id} on {self.post_id}"
