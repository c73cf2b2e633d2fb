"""Service helpers for liking posts and comments."""

import logging

from django.db import transaction
from django.db.models import Count, F

from social.exceptions import NotFound
from social.models import Account, Comment, CommentLike, Post, PostLike

logger = logging.getLogger(__name__)


class LikeService:
    """
    Like rows are the source of truth; Post.heart_count and Comment.like_count
    are caches. A row insert/delete and the matching counter change always run
    in one transaction, and `reconcile_counters` rebuilds the caches from the
    rows.
    """

    def _require_user(self, user_id):
        if not Account.objects.filter(id=user_id).exists():
            raise NotFound("User not found")

    # --- posts ----------------------------------------------------------
    def like_post(self, post_id, user_id):
        """Like a post once; returns (like, created)."""
        if not Post.objects.filter(id=post_id).exists():
            raise NotFound("Post not found")
        self._require_user(user_id)

        existing = PostLike.objects.filter(post_id=post_id, user_id=user_id).first()
        if existing is not None:
            return existing, False

        with transaction.atomic():
            like, created = PostLike.objects.get_or_create(post_id=post_id, user_id=user_id)
            if created:
                Post.objects.filter(id=post_id).update(heart_count=F("heart_count") + 1)
        return like, created

    def unlike_post(self, post_id, user_id):
        """
        Remove a like if present.

        Args:
            post_id: the liked post.
            user_id: the account whose like is removed.

        Returns:
            True when a like row was deleted, False when there was none.
        """
        with transaction.atomic():
            deleted, _ = PostLike.objects.filter(post_id=post_id, user_id=user_id).delete()
            if deleted:
                Post.objects.filter(id=post_id, heart_count__gt=0).update(
                    heart_count=F("heart_count") - 1
                )
        return bool(deleted)

    def is_post_liked(self, post_id, user_id):
        return PostLike.objects.filter(post_id=post_id, user_id=user_id).exists()

    # --- comments -------------------------------------------------------
    def like_comment(self, comment_id, user_id):
        """Like a comment once; returns (like, created, comment_owner_id)."""
        owner_id = (
            Comment.objects.filter(id=comment_id).values_list("author_id", flat=True).first()
        )
        if owner_id is None:
            raise NotFound("Comment not found")
        self._require_user(user_id)

        existing = CommentLike.objects.filter(comment_id=comment_id, user_id=user_id).first()
        if existing is not None:
            return existing, False, owner_id

        with transaction.atomic():
            like, created = CommentLike.objects.get_or_create(comment_id=comment_id, user_id=user_id)
            if created:
                Comment.objects.filter(id=comment_id).update(like_count=F("like_count") + 1)
        return like, created, owner_id

    def unlike_comment(self, comment_id, user_id):
        with transaction.atomic():
            deleted, _ = CommentLike.objects.filter(comment_id=comment_id, user_id=user_id).delete()
            if deleted:
                Comment.objects.filter(id=comment_id, like_count__gt=0).update(
                    like_count=F("like_count") - 1
                )
        return bool(deleted)

    def liked_comments_for_post(self, post_id, user_id):
        """CommentLike rows by user_id on comments under post_id."""
        return list(
            CommentLike.objects.filter(user_id=user_id, comment__post_id=post_id)
            .select_related("comment")
            .order_by("id")
        )

    # --- maintenance ----------------------------------------------------
    def reconcile_counters(self):
        """Rewrite drifted counters from like rows; returns (posts_fixed, comments_fixed)."""
        posts_fixed = self._reconcile(Post, "heart_count")
        comments_fixed = self._reconcile(Comment, "like_count")
        logger.info(
            "Reconciled like counters: %d posts, %d comments", posts_fixed, comments_fixed
        )
        return posts_fixed, comments_fixed

    def _reconcile(self, model, counter):
        drifted = list(
            model.objects.annotate(actual=Count("likes"))
            .exclude(**{counter: F("actual")})
            .values_list("id", "actual")
        )
        with transaction.atomic():
            for pk, actual in drifted:
                model.objects.filter(id=pk).update(**{counter: actual})
        return len(drifted)
