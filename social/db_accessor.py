from typing import Any, Mapping, Optional, Sequence, Set, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor wrapping the query operations services rely on."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
    ) -> QuerySet:
        """
        Return a filtered queryset.

        Args:
            filters: ORM lookups applied with filter().
            order_by: fields to order by; the model's default ordering otherwise.
            limit: maximum number of rows, or None for all.
        """
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        qs = self._apply_ordering(qs, order_by)
        return qs if limit is None else qs[:max(0, int(limit))]

    def _apply_ordering(self, qs: QuerySet, order_by: Sequence[str]) -> QuerySet:
        return qs.order_by(*order_by) if order_by else qs

    def values_in(self, column: str, **lookup: Any) -> Set[Any]:
        """Return the distinct values of one column for rows matching lookup."""
        return set(self.model.objects.filter(**lookup).values_list(column, flat=True))

    def first(self, **lookup: Any) -> Optional[Model]:
        """Return the first object matching the lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def count(self, **lookup: Any) -> int:
        return self.model.objects.filter(**lookup).count()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def get_or_create(self, defaults: Optional[Mapping[str, Any]] = None, **lookup: Any):
        """Return (object, created); safe against a concurrent insert of the same row."""
        return self.model.objects.get_or_create(defaults=defaults, **lookup)

    def update(self, lookup: Mapping[str, Any], **data: Any) -> int:
        """Update objects matching lookup; return count updated."""
        return self.model.objects.filter(**lookup).update(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
