"""Repository helpers for account lookups."""

from typing import List, Optional

from django.db.models import Q, QuerySet

from social.db_accessor import DB_Accessor
from social.models import Account


class AccountRepo(DB_Accessor):
    """Repository for basic account queries."""
    def __init__(self) -> None:
        """Initialise with the Account model."""
        super().__init__(Account)

    def existing_ids(self, ids) -> List[int]:
        return sorted(self.values_in("id", id__in=list(ids)))

    def search(self, query: str, limit: int) -> QuerySet:
        """
        Match display name, username or email, case-insensitively.

        Args:
            query: non-empty search text.
            limit: maximum number of accounts returned.

        Returns:
            Accounts ordered by display name, then username.
        """
        return (
            self.model.objects.filter(
                Q(display_name__icontains=query)
                | Q(username__icontains=query)
                | Q(email__icontains=query)
            )
            .order_by("display_name", "username")[:limit]
        )

    def followers_of(self, user_id: int, limit: Optional[int] = None) -> QuerySet:
        """Accounts following user_id, ordered by display name."""
        return self.list(
            filters={"following_edges__following_id": user_id},
            limit=limit,
        )

    def followed_by(self, user_id: int, limit: Optional[int] = None) -> QuerySet:
        """Accounts user_id follows, ordered by display name."""
        return self.list(
            filters={"follower_edges__follower_id": user_id},
            limit=limit,
        )
