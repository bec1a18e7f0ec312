from datetime import datetime

from pydantic import BaseModel


class Testimonial(BaseModel):
    id: str
    author: str
    text: str
    avatar: str
    date: datetime

    @classmethod
    def from_document(cls, doc: dict) -> "Testimonial":
        return cls(
            id=str(doc["_id"]),
            author=doc["author"],
            text=doc["text"],
            avatar=doc["avatar"],
            date=doc["date"],
        )


class TestimonialCreateRequest(BaseModel):
    author: str | None = None
    text: str | None = None
    avatar: str | None = None
