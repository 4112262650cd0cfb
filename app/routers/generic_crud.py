from typing import Type, TypeVar, Generic, List, Optional, Any, Dict, Union
from sqlalchemy.orm import Session
from sqlalchemy.inspection import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import asc
from pydantic import BaseModel
from fastapi import HTTPException, status
import logging

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


def _db_error_detail(e: SQLAlchemyError) -> str:
    # DBAPI message without the SQL statement and bound parameters
    return str(getattr(e, 'orig', None) or e)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        self.model = model
        self.pk_column = self._get_primary_key()

    def _get_primary_key(self):
        """Get primary key column dynamically"""
        pk_columns = inspect(self.model).primary_key
        if not pk_columns:
            raise ValueError(f"Model {self.model.__name__} has no primary key")
        return pk_columns[0]

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """Get single record by ID"""
        return db.query(self.model).filter(self.pk_column == id).first()

    def get_multi(
        self,
        db: Session,
        *,
        skip: Optional[int] = None,
        limit: Optional[int] = None
    ) -> List[ModelType]:
        """
        List records in primary key order.

        A falsy ``skip`` or ``limit`` (None or 0) applies no constraint, so
        ``limit=0`` returns every record.
        """
        try:
            query = db.query(self.model).order_by(asc(self.pk_column))

            if skip:
                query = query.offset(skip)
            if limit:
                query = query.limit(limit)

            return query.all()

        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model.__name__} list: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error retrieving records"
            )

    def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """Create new record"""
        obj_in_data = obj_in.model_dump() if isinstance(obj_in, BaseModel) else dict(obj_in)

        # Remove None values so column defaults apply
        obj_in_data = {k: v for k, v in obj_in_data.items() if v is not None}

        try:
            db_obj = self.model(**obj_in_data)
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Error creating record: {_db_error_detail(e)}"
            )

        logger.info(f"Created {self.model.__name__} id={getattr(db_obj, self.pk_column.key)}")
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """Partial update: only the keys present in obj_in are written, explicit None included"""
        if isinstance(obj_in, BaseModel):
            update_data = obj_in.model_dump(exclude_unset=True)
        else:
            update_data = obj_in

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        try:
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Error updating record: {_db_error_detail(e)}"
            )

        logger.info(f"Updated {self.model.__name__} id={getattr(db_obj, self.pk_column.key)} fields={sorted(update_data)}")
        return db_obj

    def delete(self, db: Session, *, db_obj: ModelType) -> None:
        """Delete record (hard delete)"""
        obj_id = getattr(db_obj, self.pk_column.key)
        try:
            db.delete(db_obj)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error deleting {self.model.__name__} with id {obj_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Error deleting record"
            )

        logger.info(f"Deleted {self.model.__name__} id={obj_id}")
