import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.exceptions.custom import (
    AllDuplicateError,
    InvalidNameError,
    NoValidImagesError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from app.mappers.hotel_merger import merge_hotel, new_images, valid_images
from app.schemas.hotel import Hotel, HotelUpsertResult

logger = logging.getLogger(__name__)


class HotelService:
    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        allowed_names: tuple[str, ...] | None = None,
        overwrite_description_on_empty: bool = True,
        with_location: bool = True,
    ):
        self._collection = collection
        self._allowed_names = allowed_names
        self._overwrite_description_on_empty = overwrite_description_on_empty
        self._with_location = with_location

    async def list_hotels(self) -> list[Hotel]:
        try:
            docs = await self._collection.find().to_list(length=None)
        except PyMongoError as exc:
            raise StoreError(f"Failed to fetch hotels: {exc}") from exc
        return [Hotel.from_document(doc) for doc in docs]

    async def get_hotel(self, name: str) -> Hotel:
        hotel = await self._find(name)
        if hotel is None:
            raise NotFoundError("Hotel", name)
        return hotel

    async def upsert(
        self,
        name: str | None,
        description: str | None = None,
        location: str | None = None,
        images: Any = None,
    ) -> HotelUpsertResult:
        """Create the hotel ``name`` or merge the payload into it."""
        if not isinstance(name, str) or name.strip() == "":
            raise ValidationError("Hotel name is required")
        if self._allowed_names is not None and name not in self._allowed_names:
            raise InvalidNameError(name)

        candidates = valid_images(images)
        current = await self._find(name)

        if current is None:
            hotel = Hotel(
                name=name,
                description=description,
                location=location if self._with_location else None,
                images=new_images([], candidates),
            )
            hotel.id = await self._insert(hotel)
            logger.info("Hotel %r added with %d image(s)", name, len(hotel.images))
            return HotelUpsertResult(created=True, hotel=hotel, added_images=hotel.images)

        hotel, added = await self._merge(current, description, location, candidates)
        return HotelUpsertResult(created=False, hotel=hotel, added_images=added)

    async def update(
        self,
        name: str,
        description: str | None = None,
        location: str | None = None,
        images: Any = None,
    ) -> Hotel:
        """Path-addressed variant of :meth:`upsert` that never creates."""
        candidates = valid_images(images)
        current = await self.get_hotel(name)
        hotel, _ = await self._merge(current, description, location, candidates)
        return hotel

    async def add_images(self, name: str, images: Any) -> tuple[Hotel, list[str]]:
        candidates = valid_images(images)
        if not candidates:
            raise NoValidImagesError()

        current = await self.get_hotel(name)
        added = new_images(current.images, candidates)
        if not added:
            raise AllDuplicateError()

        hotel = current.model_copy(update={"images": [*current.images, *added]})
        await self._set(name, {"images": hotel.images})
        logger.info("Added %d image(s) to hotel %r", len(added), name)
        return hotel, added

    async def remove_image(self, name: str, image_url: str | None) -> Hotel:
        current = await self.get_hotel(name)
        remaining = [img for img in current.images if img != image_url]
        hotel = current.model_copy(update={"images": remaining})
        await self._set(name, {"images": remaining})
        logger.info(
            "Removed %d image(s) from hotel %r",
            len(current.images) - len(remaining),
            name,
        )
        return hotel

    async def update_description(self, name: str, description: str | None) -> Hotel:
        current = await self.get_hotel(name)
        hotel = current.model_copy(update={"description": description})
        await self._set(name, {"description": description})
        logger.info("Updated description of hotel %r", name)
        return hotel

    async def delete_hotel(self, name: str) -> None:
        try:
            result = await self._collection.delete_one({"name": name})
        except PyMongoError as exc:
            raise StoreError(f"Failed to delete hotel: {exc}") from exc
        if result.deleted_count == 0:
            raise NotFoundError("Hotel", name)
        logger.info("Hotel %r deleted", name)

    async def _merge(
        self,
        current: Hotel,
        description: str | None,
        location: str | None,
        candidates: list[str],
    ) -> tuple[Hotel, list[str]]:
        updates, added = merge_hotel(
            current,
            description,
            location,
            candidates,
            overwrite_description_on_empty=self._overwrite_description_on_empty,
            with_location=self._with_location,
        )
        hotel = current.model_copy(update=updates)
        if updates:
            await self._set(current.name, updates)
        logger.info(
            "Hotel %r updated (%s), %d new image(s)",
            current.name,
            ", ".join(sorted(updates)) or "no changes",
            len(added),
        )
        return hotel, added

    async def _find(self, name: str) -> Hotel | None:
        try:
            doc = await self._collection.find_one({"name": name})
        except PyMongoError as exc:
            raise StoreError(f"Failed to fetch hotel: {exc}") from exc
        return Hotel.from_document(doc) if doc else None

    async def _insert(self, hotel: Hotel) -> str:
        doc = hotel.model_dump(exclude={"id"})
        if not self._with_location:
            doc.pop("location", None)
        try:
            result = await self._collection.insert_one(doc)
        except PyMongoError as exc:
            raise StoreError(f"Failed to save hotel: {exc}") from exc
        return str(result.inserted_id)

    async def _set(self, name: str, fields: dict[str, Any]) -> None:
        try:
            await self._collection.update_one({"name": name}, {"$set": fields})
        except PyMongoError as exc:
            raise StoreError(f"Failed to save hotel: {exc}") from exc
