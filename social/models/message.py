"""Direct message between two accounts."""

from django.conf import settings
from django.db import models


class Message(models.Model):
    """
    A direct message. `shared_post` holds a JSON snapshot of a post's display
    fields taken when the post was shared; later edits to the post do not
    change it.
    """

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='sent_messages',
    )
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='received_messages',
    )
    content = models.TextField(blank=True)
    shared_post = models.JSONField(null=True, blank=True)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "message"
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=["sender", "recipient"], name="message_sender_recipient_idx"),
        ]

    def __str__(self):
        return f"Message {self.sender_id} → {self.recipient_id}"
