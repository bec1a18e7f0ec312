from fastapi import APIRouter

from app.dependencies import TestimonialDep
from app.schemas.responses import MessageResponse, TestimonialResponse
from app.schemas.testimonial import Testimonial, TestimonialCreateRequest

router = APIRouter(prefix="/api/testimonials", tags=["testimonials"])


@router.post("", response_model=TestimonialResponse)
async def create_testimonial(
    request: TestimonialCreateRequest, service: TestimonialDep
) -> TestimonialResponse:
    testimonial = await service.create(request.author, request.text, avatar=request.avatar)
    return TestimonialResponse(message="Testimonial added successfully!", testimonial=testimonial)


@router.get("", response_model=list[Testimonial])
async def list_testimonials(service: TestimonialDep) -> list[Testimonial]:
    return await service.list_testimonials()


@router.delete("/{testimonial_id}", response_model=MessageResponse)
async def delete_testimonial(testimonial_id: str, service: TestimonialDep) -> MessageResponse:
    await service.delete(testimonial_id)
    return MessageResponse(message="Testimonial deleted successfully!")
