"""
Who may see which post.

`is_visible` is the pure rule set; `PrivacyService` gathers the two inputs it
needs from the store (authors in mutual follow with the viewer, authors the
viewer has blocked) with one batched query each, whatever the candidate count.
"""

import enum
import logging
from typing import AbstractSet, Iterable, List, Optional, Set

from social.repos import BlockRepo, FollowRepo

logger = logging.getLogger(__name__)


class UnknownPostMode(ValueError):
    """Raised by PostMode.parse for a mode string outside the known set."""


class PostMode(enum.Enum):
    PUBLIC = "public"
    FRIENDS = "friends"
    PRIVATE = "private"

    @classmethod
    def parse(cls, raw) -> "PostMode":
        """
        Normalise a stored mode. Case and surrounding whitespace are ignored,
        an empty value means public and anything containing "friend" is
        friends-only.
        """
        text = ("" if raw is None else str(raw)).strip().lower()
        if text in ("", cls.PUBLIC.value):
            return cls.PUBLIC
        if text == cls.PRIVATE.value:
            return cls.PRIVATE
        if "friend" in text:
            return cls.FRIENDS
        raise UnknownPostMode(f"unknown post mode {raw!r}")


def is_visible(
    mode,
    author_id: int,
    viewer_id: Optional[int],
    mutual_set: AbstractSet[int] = frozenset(),
    blocked_set: AbstractSet[int] = frozenset(),
) -> bool:
    """
    Decide whether viewer_id may see a post by author_id published with mode.

    viewer_id None is an anonymous viewer. mutual_set and blocked_set are the
    precomputed author ids in mutual follow with / blocked by the viewer.
    """
    if author_id in blocked_set:
        return False

    try:
        parsed = mode if isinstance(mode, PostMode) else PostMode.parse(mode)
    except UnknownPostMode:
        logger.warning("Hiding post by author %s with unrecognised mode %r", author_id, mode)
        return False

    if parsed is PostMode.PRIVATE:
        return viewer_id is not None and viewer_id == author_id
    if parsed is PostMode.PUBLIC:
        return True
    # friends-only
    if viewer_id is None:
        return False
    if viewer_id == author_id:
        return True
    return author_id in mutual_set


class PrivacyService:
    def __init__(self, follow_repo=None, block_repo=None):
        self.follow_repo = follow_repo or FollowRepo()
        self.block_repo = block_repo or BlockRepo()

    def mutual_authors(self, viewer_id: Optional[int], candidate_author_ids: Iterable[int]) -> Set[int]:
        """Authors among the candidates that follow the viewer and are followed back."""
        author_ids = {a for a in candidate_author_ids if a != viewer_id}
        if viewer_id is None or not author_ids:
            return set()
        followed = self.follow_repo.following_among(viewer_id, author_ids)
        if not followed:
            return set()
        followers = self.follow_repo.followers_among(viewer_id, followed)
        return followed & followers

    def blocked_authors(self, viewer_id: Optional[int], candidate_author_ids: Iterable[int]) -> Set[int]:
        """Authors among the candidates the viewer has blocked; empty for anonymous viewers."""
        author_ids = set(candidate_author_ids)
        if viewer_id is None or not author_ids:
            return set()
        return self.block_repo.blocked_among(viewer_id, author_ids)

    def visible_posts(self, posts: Iterable, viewer_id: Optional[int]) -> List:
        """Filter already-fetched posts down to what viewer_id may see, keeping order."""
        posts = list(posts)
        if not posts:
            return []
        author_ids = {p.author_id for p in posts}
        blocked = self.blocked_authors(viewer_id, author_ids)
        friend_authors = {p.author_id for p in posts if _is_friends_mode(p.mode)}
        mutual = self.mutual_authors(viewer_id, friend_authors)
        return [
            p for p in posts
            if is_visible(p.mode, p.author_id, viewer_id, mutual, blocked)
        ]

    def can_view_post(self, viewer_id: Optional[int], post) -> bool:
        return bool(self.visible_posts([post], viewer_id))


def _is_friends_mode(mode) -> bool:
    try:
        return PostMode.parse(mode) is PostMode.FRIENDS
    except UnknownPostMode:
        return False
