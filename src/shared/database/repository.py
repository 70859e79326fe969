"""
Generic async SQLAlchemy repository.

Concrete repositories map ORM rows to plain domain dataclasses through
``_to_entity`` and add their own filtered queries.
"""
from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.base_model import Base
from src.shared.logging import get_logger

logger = get_logger(__name__)

TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel", bound=Base)


class SQLAlchemyRepository(Generic[TEntity, TModel]):
    """
    Type Parameters:
        TEntity: Domain entity type
        TModel: SQLAlchemy ORM model type
    """

    model_class: Type[TModel]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def _name(self) -> str:
        return self.model_class.__name__.replace("Model", "")

    def _to_entity(self, model: TModel) -> TEntity:
        raise NotImplementedError("Subclass must implement _to_entity")

    async def _get_model(self, entity_id: int) -> Optional[TModel]:
        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id(self, entity_id: int) -> Optional[TEntity]:
        model = await self._get_model(entity_id)
        if model is None:
            logger.debug(f"{self._name} not found", entity_id=entity_id)
            return None
        return self._to_entity(model)

    async def exists(self, entity_id: int) -> bool:
        stmt = select(self.model_class.id).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def _add(self, model: TModel) -> TModel:
        try:
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Failed to add {self._name}", error=str(e))
            raise
        logger.debug(f"Added {self._name}", entity_id=model.id)
        return model

    async def _update(self, entity_id: int, values: dict) -> Optional[TModel]:
        model = await self._get_model(entity_id)
        if model is None:
            return None
        for key, value in values.items():
            setattr(model, key, value)
        await self.session.flush()
        await self.session.refresh(model)
        logger.debug(f"Updated {self._name}", entity_id=entity_id)
        return model

    async def delete(self, entity_id: int) -> bool:
        """
        Delete entity by ID.

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            logger.debug(f"Deleted {self._name}", entity_id=entity_id)
        return deleted
