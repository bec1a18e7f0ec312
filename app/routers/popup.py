from fastapi import APIRouter

from app.dependencies import PopupDep
from app.schemas.popup import PopupRequest, PopupSetting
from app.schemas.responses import MessageResponse, PopupResponse

router = APIRouter(prefix="/api/popup", tags=["popup"])


@router.get("", response_model=PopupSetting, response_model_exclude_none=True)
async def get_popup(store: PopupDep) -> PopupSetting:
    return await store.read()


@router.post("", response_model=PopupResponse)
async def set_popup(request: PopupRequest, store: PopupDep) -> PopupResponse:
    setting = await store.set(request.imageUrl)
    return PopupResponse(
        message="Popup image added successfully!",
        active=setting.active,
        imageUrl=setting.imageUrl,
    )


@router.delete("", response_model=MessageResponse)
async def clear_popup(store: PopupDep) -> MessageResponse:
    await store.clear()
    return MessageResponse(message="Popup removed successfully!")
