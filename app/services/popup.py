import asyncio
import json
import logging
from pathlib import Path

from app.exceptions.custom import ValidationError
from app.schemas.popup import PopupSetting

logger = logging.getLogger(__name__)


class PopupStore:
    """Single promotional popup persisted as a flat JSON file.

    Writes are not atomic and concurrent writers are not coordinated.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    async def read(self) -> PopupSetting:
        return await asyncio.to_thread(self._read)

    async def set(self, image_url: str | None) -> PopupSetting:
        if not image_url or not image_url.strip():
            raise ValidationError("Image URL is required")
        setting = PopupSetting(active=True, imageUrl=image_url)
        await asyncio.to_thread(self._write, setting)
        logger.info("Popup set to %s", image_url)
        return setting

    async def clear(self) -> None:
        removed = await asyncio.to_thread(self._remove)
        if removed:
            logger.info("Popup cleared")

    def _read(self) -> PopupSetting:
        if not self._path.exists():
            return PopupSetting(active=False)
        return PopupSetting(**json.loads(self._path.read_text(encoding="utf-8")))

    def _write(self, setting: PopupSetting) -> None:
        self._path.write_text(
            json.dumps(setting.model_dump(), indent=2), encoding="utf-8"
        )

    def _remove(self) -> bool:
        if not self._path.exists():
            return False
        self._path.unlink(missing_ok=True)
        return True
