"""Application service for the travel map document."""

import json
import logging
from typing import Any

from blog.application.interfaces import TravelRepository
from blog.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)

SAMPLE_PLACES: list[dict[str, Any]] = [
    {"name": "Beijing", "value": [116.4074, 39.9042], "time": "2024-03", "description": "The Forbidden City and the Great Wall"},
    {"name": "Shanghai", "value": [121.4737, 31.2304], "time": "2024-05", "description": "The Bund at night"},
    {"name": "Chengdu", "value": [104.0668, 30.5728], "time": "2024-07", "description": "Sichuan food and hotpot"},
    {"name": "Hangzhou", "value": [120.1551, 30.2741], "time": "2024-09", "description": "West Lake"},
    {"name": "Xi'an", "value": [108.9398, 34.3416], "time": "2024-10", "description": "The Terracotta Army and the city wall"},
]


class TravelService:
    def __init__(self, repository: TravelRepository):
        self._repository = repository

    async def get_records(self) -> dict[str, Any]:
        """Return ``{"data": [...], "visible": bool}``; a corrupt blob reads as an empty list."""
        record = await self._repository.get()
        if record is None:
            return {"data": [], "visible": False}
        try:
            data = json.loads(record.data or "[]")
        except json.JSONDecodeError as exc:
            logger.warning("Stored travel records are not valid JSON (%s); serving empty list", exc)
            data = []
        return {"data": data, "visible": record.visible}

    async def save_records(self, data: Any, visible: bool = True) -> None:
        """Upsert the single travel document. ``data`` is a JSON string or decoded value."""
        if data is None or data == "":
            raise ValidationError("Travel data is required", field="data")
        if isinstance(data, str):
            try:
                json.loads(data)
            except json.JSONDecodeError as exc:
                raise ValidationError(f"Invalid JSON format: {exc}", field="data") from exc
            serialized = data
        else:
            serialized = json.dumps(data, ensure_ascii=False)
        await self._repository.upsert(serialized, bool(visible))
        logger.info("Travel records saved (visible=%s)", bool(visible))

    async def seed_sample(self) -> bool:
        """Insert the sample places when no document exists yet."""
        if await self._repository.get() is not None:
            return False
        await self._repository.upsert(json.dumps(SAMPLE_PLACES, ensure_ascii=False), False)
        logger.info("Seeded sample travel records")
        return True
