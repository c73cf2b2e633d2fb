"""Service helpers for writing and reading notifications."""

import logging

from django.db import DatabaseError, transaction

from social.exceptions import NotFound
from social.models import Account, Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Encapsulate notification creation and querying."""

    def __init__(self, notification_model=Notification):
        self.notification_model = notification_model

    def create(self, recipient_id, title, actor_id=None, notification_type=Notification.TYPE_SYSTEM, **links):
        """Create a notification; unknown recipient or actor is a NotFound."""
        if not Account.objects.filter(id=recipient_id).exists():
            raise NotFound("Target user not found")
        if actor_id is not None and not Account.objects.filter(id=actor_id).exists():
            raise NotFound("Actor user not found")
        return self.notification_model.objects.create(
            recipient_id=recipient_id,
            actor_id=actor_id,
            notification_type=notification_type,
            title=title or "",
            **links,
        )

    def notify(self, recipient_id, title, actor_id=None, notification_type=Notification.TYPE_SYSTEM, **links):
        """
        Best-effort create used for side effects of social actions. Failures are
        logged and swallowed; the savepoint keeps a surrounding transaction usable.
        """
        try:
            with transaction.atomic():
                return self.notification_model.objects.create(
                    recipient_id=recipient_id,
                    actor_id=actor_id,
                    notification_type=notification_type,
                    title=title or "",
                    **links,
                )
        except DatabaseError as exc:
            logger.warning(
                "Skipping %s notification for account %s: %s", notification_type, recipient_id, exc
            )
            return None

    def for_user(self, user_id, limit=50, unread_only=False):
        """Most recent notifications for a user."""
        qs = self.notification_model.objects.filter(recipient_id=user_id)
        if unread_only:
            qs = qs.filter(is_read=False)
        return list(qs.select_related("actor").order_by("-created_at", "-id")[:limit])

    def unread_count(self, user_id):
        return self.notification_model.objects.filter(recipient_id=user_id, is_read=False).count()

    def mark_all_read(self, user_id):
        """Mark all unread notifications for the user as read; returns rows updated."""
        return self.notification_model.objects.filter(recipient_id=user_id, is_read=False).update(is_read=True)

    def delete(self, user_id, notification_id):
        """Delete a notification owned by user_id; NotFound when missing or not owned."""
        deleted, _ = self.notification_model.objects.filter(
            id=notification_id, recipient_id=user_id
        ).delete()
        if not deleted:
            raise NotFound("Notification not found or not owned")
        return deleted
