from typing import Generic, List, Optional, Tuple, Type, TypeVar
from uuid import UUID

from sqlalchemy.orm import Query, Session

from content_service.models.base import utcnow

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Data access for one entity type.

    Soft-deleted rows never come back from these queries; the session-level
    filter in ``models.base`` hides them. Mutating methods only stage changes,
    ``save()`` commits everything the request touched in one go.
    """

    model: Type[ModelT] = None

    def __init__(self, db: Session):
        self.db = db

    def query(self) -> Query:
        return self.db.query(self.model)

    def _ordered(self, q: Query) -> Query:
        if hasattr(self.model, "display_order"):
            return q.order_by(self.model.display_order, self.model.created_at)
        return q.order_by(self.model.created_at)

    def get(self, id: UUID) -> Optional[ModelT]:
        return self.query().filter(self.model.id == id).first()

    def get_by(self, **criteria) -> Optional[ModelT]:
        return self.query().filter_by(**criteria).first()

    def exists(self, exclude_id: Optional[UUID] = None, **criteria) -> bool:
        q = self.query().filter_by(**criteria)
        if exclude_id is not None:
            q = q.filter(self.model.id != exclude_id)
        return q.first() is not None

    def any(self) -> bool:
        return self.query().first() is not None

    def count(self) -> int:
        return self.query().count()

    def list(self) -> List[ModelT]:
        return self._ordered(self.query()).all()

    def list_active(self) -> List[ModelT]:
        return self._ordered(self.query().filter(self.model.is_active.is_(True))).all()

    def paginate(self, q: Query, page: int, page_size: int) -> Tuple[List[ModelT], int]:
        total = q.count()
        items = q.offset((page - 1) * page_size).limit(page_size).all()
        return items, total

    def add(self, obj: ModelT) -> ModelT:
        self.db.add(obj)
        return obj

    def update(self, obj: ModelT) -> ModelT:
        obj.updated_at = utcnow()
        return obj

    def delete(self, obj: ModelT) -> None:
        obj.soft_delete()

    def save(self) -> None:
        self.db.commit()

    def refresh(self, obj: ModelT) -> ModelT:
        self.db.refresh(obj)
        return obj
