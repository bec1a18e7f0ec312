from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.dependencies import HotelDep
from app.schemas.hotel import (
    AddImagesRequest,
    DescriptionRequest,
    Hotel,
    HotelPayload,
    HotelUpdateRequest,
    RemoveImageRequest,
)
from app.schemas.responses import HotelImagesResponse, HotelResponse, MessageResponse

router = APIRouter(prefix="/api/hotels", tags=["hotels"])


@router.get("", response_model=list[Hotel])
async def list_hotels(service: HotelDep) -> list[Hotel]:
    return await service.list_hotels()


@router.get("/{name}", response_model=Hotel)
async def get_hotel(name: str, service: HotelDep) -> Hotel:
    return await service.get_hotel(name)


@router.post("", response_model=HotelResponse)
async def upsert_hotel(request: HotelPayload, service: HotelDep) -> JSONResponse:
    result = await service.upsert(
        request.name,
        description=request.description,
        location=request.location,
        images=request.images,
    )
    if result.created:
        body = HotelResponse(message="Hotel added successfully!", hotel=result.hotel)
        return JSONResponse(status_code=201, content=body.model_dump(mode="json"))
    body = HotelResponse(message="Hotel updated successfully!", hotel=result.hotel)
    return JSONResponse(content=body.model_dump(mode="json"))


@router.put("/{name}", response_model=HotelResponse)
async def update_hotel(name: str, request: HotelUpdateRequest, service: HotelDep) -> HotelResponse:
    hotel = await service.update(
        name,
        description=request.description,
        location=request.location,
        images=request.images,
    )
    return HotelResponse(message="Hotel updated successfully!", hotel=hotel)


@router.delete("/{name}", response_model=MessageResponse)
async def delete_hotel(name: str, service: HotelDep) -> MessageResponse:
    await service.delete_hotel(name)
    return MessageResponse(message="Hotel deleted successfully!")


@router.post("/{name}/images", response_model=HotelImagesResponse)
async def add_images(name: str, request: AddImagesRequest, service: HotelDep) -> HotelImagesResponse:
    hotel, added = await service.add_images(name, request.images)
    return HotelImagesResponse(
        message=f"{len(added)} image(s) added successfully!",
        hotel=hotel,
        addedImages=added,
    )


@router.delete("/{name}/images", response_model=HotelResponse)
async def remove_image(name: str, request: RemoveImageRequest, service: HotelDep) -> HotelResponse:
    hotel = await service.remove_image(name, request.imageUrl)
    return HotelResponse(message="Image deleted successfully!", hotel=hotel)


@router.put("/{name}/description", response_model=HotelResponse)
async def update_description(
    name: str, request: DescriptionRequest, service: HotelDep
) -> HotelResponse:
    hotel = await service.update_description(name, request.description)
    return HotelResponse(message="Description updated successfully!", hotel=hotel)
