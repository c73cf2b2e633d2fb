"""Random feed, search and profile reads used by the feed API."""

import logging
import random
from typing import Iterable, List, Optional

from django.conf import settings

from social.exceptions import NotFound
from social.params import sanitize_ids
from social.repos import AccountRepo, BlockRepo, FollowRepo, PostRepo

from .privacy import PrivacyService

logger = logging.getLogger(__name__)


def feed_item(post) -> dict:
    """Display fields of a post as served by the feed endpoints."""
    author = post.author
    return {
        "id": post.id,
        "user_id": post.author_id,
        "title": post.title,
        "video": post.video,
        "content": post.content,
        "heart_count": post.heart_count,
        "display_name": (author.display_name or None) if author else None,
        "avatar": author.avatar if author else None,
        "comment_count": getattr(post, "comment_count", 0) or 0,
    }


class FeedService:
    """Pick random visible posts and serve search/profile reads."""

    def __init__(
        self,
        *,
        privacy_service: PrivacyService | None = None,
        post_repo: PostRepo | None = None,
        account_repo: AccountRepo | None = None,
        follow_repo: FollowRepo | None = None,
        block_repo: BlockRepo | None = None,
        rng: random.Random | None = None,
        content_type: str | None = None,
    ) -> None:
        self.follow_repo = follow_repo or FollowRepo()
        self.block_repo = block_repo or BlockRepo()
        self.privacy_service = privacy_service or PrivacyService(self.follow_repo, self.block_repo)
        self.post_repo = post_repo or PostRepo()
        self.account_repo = account_repo or AccountRepo()
        self.rng = rng or random.Random()
        self._content_type = content_type

    @property
    def content_type(self) -> str:
        return self._content_type or settings.SOCIAL_FEED_CONTENT_TYPE

    # --- random feed -----------------------------------------------------
    def pick_random_visible_post(
        self,
        exclude_ids: Iterable = (),
        viewer_id: Optional[int] = None,
    ) -> Optional[dict]:
        """
        Draw one post uniformly at random among the posts of the feed content
        type that are not excluded and that viewer_id may see. Returns None
        when nothing qualifies.
        """
        excluded = sanitize_ids(exclude_ids)
        candidates = list(
            self.post_repo.find_candidates(content_type=self.content_type, exclude_ids=excluded)
        )
        if not candidates:
            return None

        visible = self.privacy_service.visible_posts(candidates, viewer_id)
        if not visible:
            return None

        chosen = visible[self.rng.randrange(len(visible))]
        return feed_item(chosen)

    def first_posts(self, limit: int = 2) -> List[dict]:
        """The lowest-id posts of the feed content type."""
        return [
            feed_item(p)
            for p in self.post_repo.first_of_type(content_type=self.content_type, limit=limit)
        ]

    # --- search ---------------------------------------------------------
    def search_posts(self, query: str | None, limit: int = 50, viewer_id: Optional[int] = None) -> List[dict]:
        """
        Posts of the feed content type matching the query.

        Args:
            query: search text; blank returns an empty list.
            limit: maximum number of matches fetched before block filtering.
            viewer_id: posts by authors this account blocked are dropped.

        Returns:
            Feed items with mode, topic, sports and created_at added.
        """
        query = (query or "").strip()
        if not query:
            return []
        posts = list(self.post_repo.search(content_type=self.content_type, query=query, limit=limit))
        blocked = self.privacy_service.blocked_authors(viewer_id, {p.author_id for p in posts})
        results = []
        for post in posts:
            if post.author_id in blocked:
                continue
            item = feed_item(post)
            item.update(
                mode=post.mode,
                topic=post.topic,
                sports=post.sports,
                created_at=post.created_at,
            )
            results.append(item)
        return results

    def search_users(self, query: str | None, limit: int = 50, viewer_id: Optional[int] = None) -> List[dict]:
        """Accounts matching the query, without those the viewer blocked."""
        query = (query or "").strip()
        if not query:
            return []
        accounts = list(self.account_repo.search(query, limit))
        blocked = self.privacy_service.blocked_authors(viewer_id, {a.id for a in accounts})
        return [
            _profile_fields(account)
            for account in accounts
            if account.id not in blocked
        ]

    # --- profile --------------------------------------------------------
    def user_profile(self, target_id: int, viewer_id: Optional[int] = None) -> dict:
        """Counts, follow state and the target's feed posts the viewer may see."""
        target = self.account_repo.first(id=target_id)
        if target is None:
            raise NotFound("User not found")

        is_following = bool(
            viewer_id and self.follow_repo.find_edge(viewer_id, target_id) is not None
        )
        posts = self.post_repo.list_for_author(target_id, content_type=self.content_type)
        visible = self.privacy_service.visible_posts(posts, viewer_id)

        return {
            "user": _profile_fields(target),
            "followers_count": self.follow_repo.followers_count(target_id),
            "following_count": self.follow_repo.following_count(target_id),
            "is_following": is_following,
            "videos": [
                {
                    "id": p.id,
                    "title": p.title,
                    "video": p.video,
                    "content": p.content,
                    "mode": p.mode,
                    "heart_count": p.heart_count,
                    "created_at": p.created_at,
                    "comment_count": getattr(p, "comment_count", 0) or 0,
                }
                for p in visible
            ],
        }


def _profile_fields(account) -> dict:
    return {
        "id": account.id,
        "display_name": account.display_name or None,
        "username": account.username,
        "avatar": account.avatar,
        "story": account.story,
        "email": account.email or None,
    }
