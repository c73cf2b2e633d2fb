"""Repository helpers for fetching posts."""

from typing import Iterable, Optional

from django.db.models import Count, Q, QuerySet

from social.db_accessor import DB_Accessor
from social.models import Post


class PostRepo(DB_Accessor):
    """Repository for Post queries (feed candidates, search, per-author)."""
    def __init__(self) -> None:
        """Initialise with the Post model."""
        super().__init__(Post)

    def with_author(self) -> QuerySet:
        """Posts with the author row joined and the comment count attached."""
        return (
            self.model.objects.select_related("author")
            .annotate(comment_count=Count("comments", distinct=True))
        )

    def find_candidates(
        self,
        *,
        content_type: str,
        exclude_ids: Optional[Iterable[int]] = None,
    ) -> QuerySet:
        """Return every post of a content type whose id is not excluded."""
        qs = self.with_author().filter(content_type=content_type)
        exclude_ids = list(exclude_ids or [])
        if exclude_ids:
            qs = qs.exclude(id__in=exclude_ids)
        return qs.order_by("id")

    def first_of_type(self, *, content_type: str, limit: int = 2) -> QuerySet:
        """
        Return the lowest-id posts of a content type.

        Args:
            content_type: post type to read.
            limit: number of posts returned.
        """
        return self.with_author().filter(content_type=content_type).order_by("id")[:limit]

    def search(self, *, content_type: str, query: str, limit: int) -> QuerySet:
        """Case-insensitive match over title, content, topic and sports, newest first."""
        return (
            self.with_author()
            .filter(content_type=content_type)
            .filter(
                Q(title__icontains=query)
                | Q(content__icontains=query)
                | Q(topic__icontains=query)
                | Q(sports__icontains=query)
            )
            .order_by("-created_at", "-id")[:limit]
        )

    def list_for_author(self, author_id: int, *, content_type: Optional[str] = None) -> QuerySet:
        """
        Return posts authored by a given account, newest first.

        Args:
            author_id: the authoring account.
            content_type: restrict to one post type; every type when omitted.

        Returns:
            A queryset with the author joined and `comment_count` annotated.
        """
        qs = self.with_author().filter(author_id=author_id)
        if content_type:
            qs = qs.filter(content_type=content_type)
        return qs.order_by("-created_at", "-id")
