from contextlib import contextmanager
from typing import Generic, Iterator, List, Type, TypeVar
import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from registrar.core.exceptions import DataAccessError
from registrar.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)
SchemaType = TypeVar("SchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseStore(Generic[ModelType, SchemaType]):
    """Shared plumbing for the stores: one session per operation.

    Every operation is a single unit of work. Statements issued inside
    ``session()`` are committed together on a clean exit; any SQLAlchemy
    failure is rolled back and re-raised as ``DataAccessError``.
    """

    def __init__(self, model: Type[ModelType], schema: Type[SchemaType], session_factory: sessionmaker):
        self.model = model
        self.schema = schema
        self.session_factory = session_factory

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
            db.commit()
        # OverflowError: out-of-range integers the sqlite driver does not wrap
        except (SQLAlchemyError, OverflowError) as e:
            self._rollback(db)
            logger.error(f"Database error on {self.model.__name__}: {e}")
            raise DataAccessError(f"Error accessing {self.model.__tablename__}") from e
        finally:
            db.close()

    def _rollback(self, db: Session) -> None:
        try:
            db.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed on {self.model.__name__}: {e}")

    def _list_active(self) -> List[SchemaType]:
        with self.session() as db:
            rows = (
                db.query(self.model)
                .filter(self.model.active.is_(True))
                .order_by(self.model.id)
                .all()
            )
            return [self.schema.model_validate(row) for row in rows]

    def _insert(self, values: dict) -> int:
        """Insert one row and return the identifier the database assigned (0 if none)."""
        with self.session() as db:
            db_obj = self.model(**values)
            db.add(db_obj)
            db.flush()
            return db_obj.id or 0

    def _update_by_id(self, id: int, values: dict) -> int:
        with self.session() as db:
            return (
                db.query(self.model)
                .filter(self.model.id == id)
                .update(values, synchronize_session=False)
            )
