"""Concrete travel-record repository backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import TravelRepository
from blog.domain.entities import TravelRecord
from blog.infrastructure.database.models import TravelRecordModel


class SQLAlchemyTravelRepository(TravelRepository):
    """Implements the TravelRepository port; the table holds one logical row."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: TravelRecordModel) -> TravelRecord:
        return TravelRecord(
            id=model.id,
            data=model.data,
            visible=bool(model.visible),
            updated_at=model.updated_at,
        )

    async def _latest(self) -> TravelRecordModel | None:
        result = await self._session.execute(
            select(TravelRecordModel).order_by(TravelRecordModel.id.desc()).limit(1)
        )
        return result.scalar_one_or_none()

    async def get(self) -> TravelRecord | None:
        model = await self._latest()
        return self._to_entity(model) if model else None

    async def upsert(self, data: str, visible: bool) -> TravelRecord:
        model = await self._latest()
        if model is None:
            model = TravelRecordModel(data=data, visible=visible)
            self._session.add(model)
        else:
            model.data = data
            model.visible = visible
            model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()
        return self._to_entity(model)
