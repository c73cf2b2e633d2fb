"""Repository helpers for block edges."""

from typing import Iterable, List, Optional, Set, Tuple

from social.db_accessor import DB_Accessor
from social.models import Block


class BlockRepo(DB_Accessor):
    """Repository wrapper for block edges."""
    def __init__(self) -> None:
        super().__init__(Block)

    def blocked_among(self, blocker_id: int, candidate_ids: Iterable[int]) -> Set[int]:
        """Ids among candidate_ids that blocker_id has blocked, in one query."""
        return self.values_in(
            "blocked_id", blocker_id=blocker_id, blocked_id__in=list(candidate_ids)
        )

    def blocked_ids(self, blocker_id: int) -> List[int]:
        """
        Ids of every account blocker_id has blocked.

        Args:
            blocker_id: the account whose block list is read.

        Returns:
            Blocked account ids in the order the blocks were created.
        """
        return list(
            self.model.objects.filter(blocker_id=blocker_id)
            .order_by("id")
            .values_list("blocked_id", flat=True)
        )

    def find_edge(self, blocker_id: int, blocked_id: int) -> Optional[Block]:
        """Return the blocker -> blocked edge, or None."""
        return self.first(blocker_id=blocker_id, blocked_id=blocked_id)

    def create_edge(self, blocker_id: int, blocked_id: int) -> Tuple[Block, bool]:
        return self.get_or_create(blocker_id=blocker_id, blocked_id=blocked_id)

    def delete_edge(self, blocker_id: int, blocked_id: int) -> int:
        return self.delete(blocker_id=blocker_id, blocked_id=blocked_id)
