from typing import Any

from pydantic import BaseModel


class Hotel(BaseModel):
    id: str | None = None
    name: str
    description: str | None = None
    location: str | None = None
    images: list[str] = []

    @classmethod
    def from_document(cls, doc: dict) -> "Hotel":
        return cls(
            id=str(doc["_id"]) if doc.get("_id") is not None else None,
            name=doc["name"],
            description=doc.get("description"),
            location=doc.get("location"),
            images=list(doc.get("images") or []),
        )


class HotelPayload(BaseModel):
    """Fields accepted by the upsert routes. ``images`` may be a single URL."""

    name: str | None = None
    description: str | None = None
    location: str | None = None
    images: Any = None


class HotelUpdateRequest(BaseModel):
    description: str | None = None
    location: str | None = None
    images: Any = None


class AddImagesRequest(BaseModel):
    images: Any = None


class RemoveImageRequest(BaseModel):
    imageUrl: str | None = None


class DescriptionRequest(BaseModel):
    description: str | None = None


class HotelUpsertResult(BaseModel):
    created: bool
    hotel: Hotel
    added_images: list[str] = []
