import logging
from typing import Generic, List, Optional, Type, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from sqlalchemy import ColumnElement, true
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from hackernews.crud.errors import to_storage_error

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")  # No bound constraint
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with the find-unique, find-many and create primitives.

        **Parameters**

        * `model`: A SQLAlchemy model class with an integer `id` primary key
        """
        self.model = model

    async def aget(self, db: AsyncSession, id: int) -> Optional[ModelType]:
        return await db.get(self.model, id)

    async def aget_multi(
        self,
        db: AsyncSession,
        *,
        where: ColumnElement[bool] | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> List[ModelType]:
        stmt = (
            select(self.model)
            .where(where if where is not None else true())
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def acreate(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """Inserts a row and returns it with its storage-assigned columns loaded.

        The insert runs inside a savepoint, so a rejected row is undone on its
        own and earlier writes in the same session are kept. Raises
        :class:`~hackernews.core.exceptions.StorageError` when the insert
        violates a constraint.
        """
        obj_in_data = jsonable_encoder(obj_in)
        db_obj = self.model(**obj_in_data)
        try:
            async with db.begin_nested():
                db.add(db_obj)
                await db.flush()
        except IntegrityError as e:
            self._discard(db, db_obj)
            storage_error = to_storage_error(e)
            logger.info(
                f"Insert into {self.model.__tablename__} rejected by storage",
                extra={"props": {"kind": storage_error.kind.value}},
            )
            raise storage_error from e
        except SQLAlchemyError:
            self._discard(db, db_obj)
            raise
        await db.refresh(db_obj)
        return db_obj

    @staticmethod
    def _discard(db: AsyncSession, db_obj: ModelType) -> None:
        # Still pending after the savepoint rollback; the request's commit would retry it
        if db_obj in db:
            db.expunge(db_obj)
