import functools
import logging

from django.db import DatabaseError, transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from social.models import Comment, CommentLike, Follow, Notification, PostLike
from social.services.notifications import NotificationService

logger = logging.getLogger(__name__)

notifications = NotificationService()


def best_effort(handler):
    """
    Run a receiver inside its own savepoint. Store failures while resolving
    names or recipients are logged and never reach the action that sent the
    signal.
    """
    @functools.wraps(handler)
    def wrapper(sender, instance, created, **kwargs):
        if not created:
            return
        try:
            with transaction.atomic():
                handler(sender, instance, **kwargs)
        except DatabaseError as exc:
            logger.warning("%s skipped for %s %s: %s", handler.__name__, sender.__name__, instance.pk, exc)
    return wrapper


def _name(account):
    return account.display_name or account.username


@receiver(post_save, sender=Follow)
@best_effort
def notify_on_follow(sender, instance, **kwargs):
    """Tell an account it has a new follower."""
    notifications.notify(
        instance.following_id,
        f"{_name(instance.follower)} started following you",
        actor_id=instance.follower_id,
        notification_type=Notification.TYPE_FOLLOW,
    )


@receiver(post_save, sender=PostLike)
@best_effort
def notify_on_post_like(sender, instance, **kwargs):
    """Tell the author someone else liked their post."""
    author_id = instance.post.author_id
    if instance.user_id == author_id:
        return
    notifications.notify(
        author_id,
        f"{_name(instance.user)} liked your post",
        actor_id=instance.user_id,
        notification_type=Notification.TYPE_LIKE_POST,
        post_id=instance.post_id,
    )


@receiver(post_save, sender=CommentLike)
@best_effort
def notify_on_comment_like(sender, instance, **kwargs):
    comment = instance.comment
    if instance.user_id == comment.author_id:
        return
    notifications.notify(
        comment.author_id,
        f"{_name(instance.user)} liked your comment",
        actor_id=instance.user_id,
        notification_type=Notification.TYPE_LIKE_COMMENT,
        post_id=comment.post_id,
        comment_id=instance.comment_id,
    )


@receiver(post_save, sender=Comment)
@best_effort
def notify_on_comment(sender, instance, **kwargs):
    """Notify the post author of a comment, or the parent's author of a reply."""
    if instance.parent_id:
        recipient_id = instance.parent.author_id
        notification_type = Notification.TYPE_REPLY_COMMENT
        title = f"{_name(instance.author)} replied to your comment"
    else:
        recipient_id = instance.post.author_id
        notification_type = Notification.TYPE_COMMENT_POST
        title = f"{_name(instance.author)} commented on your post"
    if recipient_id == instance.author_id:
        return
    notifications.notify(
        recipient_id,
        title,
        actor_id=instance.author_id,
        notification_type=notification_type,
        post_id=instance.post_id,
        comment_id=instance.id,
    )
