"""Direct messages, including posts shared into a conversation."""

from django.db.models import Q

from social.exceptions import NotFound, ValidationError
from social.models import Account, Message, Post


def post_snapshot(post) -> dict:
    """Copy of a post's display fields at share time."""
    author = post.author
    return {
        "id": post.id,
        "user_id": post.author_id,
        "content_type": post.content_type,
        "title": post.title,
        "content": post.content,
        "video": post.video,
        "images": post.image_paths,
        "display_name": author.display_name or None,
        "avatar": author.avatar,
    }


class MessageService:

    def _require_accounts(self, *ids):
        found = set(Account.objects.filter(id__in=ids).values_list("id", flat=True))
        if not set(ids) <= found:
            raise NotFound("User not found")

    def send(self, sender_id, recipient_id, content):
        content = (content or "").strip()
        if not content:
            raise ValidationError({"content": "Message text is required."})
        self._require_accounts(sender_id, recipient_id)
        return Message.objects.create(sender_id=sender_id, recipient_id=recipient_id, content=content)

    def share_post(self, sender_id, recipient_id, post_id, content=""):
        """Send a message embedding a snapshot of post_id."""
        self._require_accounts(sender_id, recipient_id)
        post = (
            Post.objects.select_related("author")
            .prefetch_related("images")
            .filter(id=post_id)
            .first()
        )
        if post is None:
            raise NotFound("Post not found")
        return Message.objects.create(
            sender_id=sender_id,
            recipient_id=recipient_id,
            content=(content or "").strip(),
            shared_post=post_snapshot(post),
        )

    def conversation(self, user_a, user_b, limit=50):
        """The latest `limit` messages between two accounts, oldest first."""
        qs = Message.objects.filter(
            Q(sender_id=user_a, recipient_id=user_b) | Q(sender_id=user_b, recipient_id=user_a)
        ).order_by("-created_at", "-id")[:limit]
        return list(reversed(list(qs)))

    def inbox(self, user_id, limit=50):
        """The latest `limit` messages sent or received by user_id, oldest first."""
        qs = (
            Message.objects.filter(Q(sender_id=user_id) | Q(recipient_id=user_id))
            .select_related("sender", "recipient")
            .order_by("-created_at", "-id")[:limit]
        )
        return list(reversed(list(qs)))

    def mark_read(self, recipient_id, sender_id):
        """
        Mark unread messages from sender_id to recipient_id as read.

        Returns:
            Number of messages updated.
        """
        return Message.objects.filter(
            recipient_id=recipient_id, sender_id=sender_id, is_read=False
        ).update(is_read=True)
