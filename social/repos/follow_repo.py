"""Repository helpers for follow edges."""

from typing import Iterable, Optional, Set, Tuple

from social.db_accessor import DB_Accessor
from social.models import Follow


class FollowRepo(DB_Accessor):
    """Repository wrapper for follow edges."""
    def __init__(self) -> None:
        """Initialise with the Follow model."""
        super().__init__(Follow)

    def following_among(self, viewer_id: int, author_ids: Iterable[int]) -> Set[int]:
        """Ids among author_ids that viewer_id follows, in one query."""
        return self.values_in(
            "following_id", follower_id=viewer_id, following_id__in=list(author_ids)
        )

    def followers_among(self, viewer_id: int, author_ids: Iterable[int]) -> Set[int]:
        """Ids among author_ids that follow viewer_id, in one query."""
        return self.values_in(
            "follower_id", follower_id__in=list(author_ids), following_id=viewer_id
        )

    def following_ids(self, user_id: int, limit: Optional[int] = None):
        """
        Ids of the accounts user_id follows, oldest follow first.

        Args:
            user_id: the following account.
            limit: cap on the number of ids, or None for all.
        """
        qs = self.model.objects.filter(follower_id=user_id).order_by("id")
        if limit is not None:
            qs = qs[:limit]
        return list(qs.values_list("following_id", flat=True))

    def find_edge(self, follower_id: int, following_id: int) -> Optional[Follow]:
        return self.first(follower_id=follower_id, following_id=following_id)

    def create_edge(self, follower_id: int, following_id: int) -> Tuple[Follow, bool]:
        """Create the edge unless it already exists; returns (edge, created)."""
        return self.get_or_create(follower_id=follower_id, following_id=following_id)

    def delete_edge(self, follower_id: int, following_id: int) -> int:
        return self.delete(follower_id=follower_id, following_id=following_id)

    def followers_count(self, user_id: int) -> int:
        return self.count(following_id=user_id)

    def following_count(self, user_id: int) -> int:
        return self.count(follower_id=user_id)
