# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Generic keyed record store with parent-scoped listing.

One instance per entity type.  All reads skip soft-deleted rows, so a
deleted record is indistinguishable from one that never existed.  Writes
commit immediately: each call is a single-row atomic operation and nothing
here spans more than one statement.
"""

from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")


class RecordStore(Generic[T]):
    def __init__(self, model: type[T], key_attr: str, parent_attr: Optional[str] = None):
        self.model = model
        self.key_attr = key_attr
        self.parent_attr = parent_attr

    def _live(self, db: Session):
        return db.query(self.model).filter(self.model.deleted_at.is_(None))

    def key_of(self, obj: T) -> str:
        return getattr(obj, self.key_attr)

    def get_by_key(self, db: Session, key: str) -> Optional[T]:
        """Look up a live row by its public identifier."""
        column = getattr(self.model, self.key_attr)
        return self._live(db).filter(column == key).first()

    def list_by_parent(self, db: Session, parent_key: str) -> List[T]:
        column = getattr(self.model, self.parent_attr)
        return (
            self._live(db)
            .filter(column == parent_key)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .all()
        )

    def create(self, db: Session, obj: T) -> T:
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def update(self, db: Session, obj: T) -> T:
        db.commit()
        db.refresh(obj)
        return obj

    def soft_delete(self, db: Session, obj: T) -> None:
        obj.deleted_at = datetime.now(timezone.utc)
        db.commit()
