"""Models for likes on posts and comments."""

from django.conf import settings
from django.db import models

from .comment import Comment
from .post import Post


class PostLike(models.Model):
    """Account like on a post; the row is the source of truth for heart_count."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='post_likes'
    )
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        db_column='post_id',
        related_name='likes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/post pair."""
        db_table = "post_like"
        constraints = [
            models.UniqueConstraint(fields=["user", "post"], name="uniq_post_like_user_post"),
        ]

    def __str__(self):
        return f"{self.user_id} → post {self.post_id}"


class CommentLike(models.Model):
    """Account like on a comment."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comment_likes'
    )
    comment = models.ForeignKey(
        Comment,
        on_delete=models.CASCADE,
        db_column='comment_id',
        related_name='likes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per user/comment pair."""
        db_table = "comment_like"
        constraints = [
            models.UniqueConstraint(fields=["user", "comment"], name="uniq_comment_like_user_comment"),
        ]

    def __str__(self):
        return f"{self.user_id} → comment {self.comment_id}"
