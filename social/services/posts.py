"""Service helpers for creating, reading, editing and deleting posts."""

import logging

from django.db import transaction

from social.exceptions import NotFound, PermissionDenied, ValidationError
from social.models import Post, PostImage
from social.repos import AccountRepo, PostRepo

from .privacy import PostMode, PrivacyService, UnknownPostMode

logger = logging.getLogger(__name__)

CONTENT_TYPES = {choice for choice, _ in Post.TYPE_CHOICES}
EDITABLE_FIELDS = ("title", "content", "video", "mode", "topic", "sports")


class PostService:
    """
    Post lifecycle. Reads go through PrivacyService, so a post the viewer may
    not see is reported exactly like a post that does not exist.
    Edits and deletes are reserved to the author.
    """

    def __init__(self, post_repo=None, account_repo=None, privacy_service=None):
        self.post_repo = post_repo or PostRepo()
        self.account_repo = account_repo or AccountRepo()
        self.privacy_service = privacy_service or PrivacyService()

    @transaction.atomic
    def create_post(self, user_id, *, content_type, title="", content="", mode="", image_paths=None, **extra):
        """
        Create a post with its ordered images.

        Args:
            user_id: id of the authoring account.
            content_type: one of "text", "image" or "video".
            mode: visibility policy; stored normalised ("public", "friends", "private").
            image_paths: optional list of stored image references, kept in order.
            **extra: video, topic and sports.

        Returns:
            The created Post.
        """
        if content_type not in CONTENT_TYPES:
            raise ValidationError({"type": f"Unsupported post type {content_type!r}."})
        if not self.account_repo.exists(id=user_id):
            raise NotFound("User not found")

        post = self.post_repo.create(
            author_id=user_id,
            content_type=content_type,
            mode=_normalise_mode(mode),
            title=str(title or "").strip(),
            content=str(content or ""),
            **_clean_extra(extra),
        )
        self._replace_images(post, image_paths or [])
        logger.info("Account %s created %s post %s", user_id, content_type, post.id)
        return post

    def get_post(self, post_id, viewer_id=None):
        """Return the post if viewer_id may see it; NotFound otherwise."""
        post = self.post_repo.with_author().filter(id=post_id).first()
        if post is None or not self.privacy_service.can_view_post(viewer_id, post):
            raise NotFound("Post not found")
        return post

    def posts_by_user(self, author_id, viewer_id=None):
        """All posts of any type by author_id that viewer_id may see, newest first."""
        if not self.account_repo.exists(id=author_id):
            raise NotFound("User not found")
        posts = self.post_repo.list_for_author(author_id).prefetch_related("images")
        return self.privacy_service.visible_posts(posts, viewer_id)

    @transaction.atomic
    def update_post(self, post_id, user_id, image_paths=None, **changes):
        """
        Apply a partial edit. Only keys in EDITABLE_FIELDS are honoured;
        image_paths, when given, replaces the image list (an empty list clears it).
        """
        post = self._owned_post(post_id, user_id)
        updates = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS and v is not None}
        if "mode" in updates:
            updates["mode"] = _normalise_mode(updates["mode"])
        if updates:
            self.post_repo.update({"id": post.id}, **updates)
        if image_paths is not None:
            self._replace_images(post, image_paths)
        return self.get_post(post.id, user_id)

    def delete_post(self, post_id, user_id):
        """Delete a post; its images, likes and comments go with it."""
        post = self._owned_post(post_id, user_id)
        self.post_repo.delete(id=post.id)
        logger.info("Account %s deleted post %s", user_id, post_id)

    def _owned_post(self, post_id, user_id):
        post = self.post_repo.first(id=post_id)
        if post is None:
            raise NotFound("Post not found")
        if post.author_id != user_id:
            raise PermissionDenied("Only the author can change this post.")
        return post

    def _replace_images(self, post, image_paths):
        PostImage.objects.filter(post=post).delete()
        PostImage.objects.bulk_create(
            PostImage(post=post, image=path, position=index)
            for index, path in enumerate(p for p in image_paths if p)
        )


def _normalise_mode(raw):
    try:
        return PostMode.parse(raw).value
    except UnknownPostMode:
        raise ValidationError({"mode": f"Unknown post mode {raw!r}."})


def _clean_extra(extra):
    return {k: extra[k] for k in ("video", "topic", "sports") if extra.get(k) is not None}
