from django.conf import settings
from django.db import models

from .comment import Comment
from .post import Post

"""
Notification model

In-app notifications (the "bell").

- `recipient`: who receives the notification
- `actor`: who triggered it; empty for system notices
- `notification_type`: what kind of event it is
- `title`: the rendered text shown to the recipient
- `post` / `comment`: optional links to the content involved

Notifications are written best-effort by `NotificationService.notify`; a
failure to write one never fails the action that caused it.
"""

class Notification(models.Model):
    TYPE_LIKE_POST = 'like_post'
    TYPE_COMMENT_POST = 'comment_post'
    TYPE_LIKE_COMMENT = 'like_comment'
    TYPE_REPLY_COMMENT = 'reply_comment'
    TYPE_FOLLOW = 'follow'
    TYPE_SYSTEM = 'system'

    TYPES = [
        (TYPE_LIKE_POST, 'Like post'),
        (TYPE_COMMENT_POST, 'Comment post'),
        (TYPE_LIKE_COMMENT, 'Like comment'),
        (TYPE_REPLY_COMMENT, 'Reply comment'),
        (TYPE_FOLLOW, 'Follow'),
        (TYPE_SYSTEM, 'System'),
    ]

    recipient = models.ForeignKey(settings.AUTH_USER_MODEL, related_name='notifications', on_delete=models.CASCADE)
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='sent_notifications',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
    )
    notification_type = models.CharField(max_length=20, choices=TYPES, default=TYPE_SYSTEM)
    title = models.CharField(max_length=255, blank=True)
    post = models.ForeignKey(Post, null=True, blank=True, on_delete=models.CASCADE)
    comment = models.ForeignKey(Comment, null=True, blank=True, on_delete=models.CASCADE)

    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notification'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Notification for {self.recipient_id}: {self.notification_type}"
