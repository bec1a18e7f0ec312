import logging
from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from app.exceptions.custom import NotFoundError, StoreError, ValidationError
from app.schemas.testimonial import Testimonial

logger = logging.getLogger(__name__)


class TestimonialService:
    def __init__(self, collection: AsyncIOMotorCollection, default_avatar: str):
        self._collection = collection
        self._default_avatar = default_avatar

    async def create(
        self, author: str | None, text: str | None, avatar: str | None = None
    ) -> Testimonial:
        if not author or not author.strip() or not text or not text.strip():
            raise ValidationError("Name and message are required")

        doc = {
            "author": author,
            "text": text,
            "avatar": avatar or self._default_avatar,
            "date": datetime.now(timezone.utc),
        }
        try:
            result = await self._collection.insert_one(doc)
        except PyMongoError as exc:
            raise StoreError(f"Failed to save testimonial: {exc}") from exc

        doc["_id"] = result.inserted_id
        logger.info("Testimonial %s added by %r", result.inserted_id, author)
        return Testimonial.from_document(doc)

    async def list_testimonials(self) -> list[Testimonial]:
        try:
            docs = await self._collection.find().sort("date", DESCENDING).to_list(length=None)
        except PyMongoError as exc:
            raise StoreError(f"Failed to fetch testimonials: {exc}") from exc
        return [Testimonial.from_document(doc) for doc in docs]

    async def delete(self, testimonial_id: str) -> None:
        try:
            oid = ObjectId(testimonial_id)
        except (InvalidId, TypeError):
            raise NotFoundError("Testimonial", testimonial_id)

        try:
            result = await self._collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            raise StoreError(f"Failed to delete testimonial: {exc}") from exc
        if result.deleted_count == 0:
            raise NotFoundError("Testimonial", testimonial_id)
        logger.info("Testimonial %s deleted", testimonial_id)
