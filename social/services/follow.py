from typing import List

from django.db import transaction

from social.exceptions import NotFound, ValidationError
from social.repos import AccountRepo, BlockRepo, FollowRepo


class SocialGraphService:
    """
    Follow and block edges. Creates are idempotent (an existing edge is
    returned, not duplicated) and deletes succeed when there is nothing to
    delete. The unique constraints on both tables are what make concurrent
    creates safe; the existence checks only save a round trip.
    """

    def __init__(self, follow_repo=None, block_repo=None, account_repo=None):
        self.follow_repo = follow_repo or FollowRepo()
        self.block_repo = block_repo or BlockRepo()
        self.account_repo = account_repo or AccountRepo()

    def _require_pair(self, source_id, target_id, verb):
        if source_id == target_id:
            raise ValidationError(f"Cannot {verb} yourself.")
        found = set(self.account_repo.existing_ids([source_id, target_id]))
        if source_id not in found or target_id not in found:
            raise NotFound("User not found")

    # --- follow ---------------------------------------------------------
    @transaction.atomic
    def follow(self, follower_id: int, following_id: int):
        """Create follower → following; returns (edge, created)."""
        self._require_pair(follower_id, following_id, "follow")
        existing = self.follow_repo.find_edge(follower_id, following_id)
        if existing is not None:
            return existing, False
        return self.follow_repo.create_edge(follower_id, following_id)

    @transaction.atomic
    def unfollow(self, follower_id: int, following_id: int) -> int:
        """Delete the edge if present; returns how many rows went away (0 or 1)."""
        return self.follow_repo.delete_edge(follower_id, following_id)

    def is_following(self, follower_id: int, following_id: int) -> bool:
        """True when the follower -> following edge exists."""
        return self.follow_repo.find_edge(follower_id, following_id) is not None

    def mutual_followings(self, user_id: int, limit: int = 50) -> List:
        """
        Accounts user_id follows that follow back. `limit` caps how many
        followed accounts are inspected, not the size of the result.
        """
        following = self.follow_repo.following_ids(user_id, limit=limit)
        if not following:
            return []
        mutual_ids = self.follow_repo.followers_among(user_id, following)
        if not mutual_ids:
            return []
        return list(self.account_repo.list(filters={"id__in": mutual_ids}))

    def followers(self, user_id: int, limit: int = 200) -> List:
        """
        Accounts that follow user_id.

        Args:
            user_id: the followed account; NotFound when it does not exist.
            limit: maximum number of accounts returned.
        """
        self._require_account(user_id)
        return list(self.account_repo.followers_of(user_id, limit=limit))

    def following(self, user_id: int, limit: int = 200) -> List:
        """Accounts user_id follows."""
        self._require_account(user_id)
        return list(self.account_repo.followed_by(user_id, limit=limit))

    def _require_account(self, user_id):
        if not self.account_repo.exists(id=user_id):
            raise NotFound("User not found")

    # --- block ----------------------------------------------------------
    @transaction.atomic
    def block(self, blocker_id: int, blocked_id: int):
        """Create blocker → blocked; returns (edge, created)."""
        self._require_pair(blocker_id, blocked_id, "block")
        existing = self.block_repo.find_edge(blocker_id, blocked_id)
        if existing is not None:
            return existing, False
        return self.block_repo.create_edge(blocker_id, blocked_id)

    @transaction.atomic
    def unblock(self, blocker_id: int, blocked_id: int) -> int:
        return self.block_repo.delete_edge(blocker_id, blocked_id)

    def is_blocking(self, blocker_id: int, blocked_id: int) -> bool:
        """True when blocker_id has blocked blocked_id."""
        return self.block_repo.find_edge(blocker_id, blocked_id) is not None

    def blocked_user_ids(self, blocker_id: int) -> List[int]:
        return self.block_repo.blocked_ids(blocker_id)
