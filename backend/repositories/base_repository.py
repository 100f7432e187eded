"""
Base repository for models keyed by an integer primary key.
"""

from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Insert-or-update, lookup, existence check and delete for one model.

    Every write is flushed so generated ids and constraint violations show
    up immediately; committing is left to the service.
    """

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model

    def save(self, obj: T) -> T:
        """
        Insert a transient instance or flush changes to an attached one.

        Returns:
            The same instance, with its primary key populated
        """
        if obj not in self.db:
            self.db.add(obj)
        self.db.flush()
        return obj

    def get_by_id(self, id: int) -> Optional[T]:
        """Return the instance with this key, or None."""
        return self.db.get(self.model, id)

    def get_all(self) -> List[T]:
        """Return every row, oldest id first."""
        return self.db.query(self.model).order_by(self.model.id).all()

    def exists(self, id: int) -> bool:
        return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

    def delete_by_id(self, id: int) -> Optional[T]:
        """
        Remove the row with this key.

        Returns:
            The removed instance (its loaded attributes stay readable),
            or None when nothing matched
        """
        obj = self.get_by_id(id)
        if obj is None:
            return None
        self.db.delete(obj)
        self.db.flush()
        return obj
