from pydantic import BaseModel


class PopupSetting(BaseModel):
    active: bool = False
    imageUrl: str | None = None


class PopupRequest(BaseModel):
    imageUrl: str | None = None
