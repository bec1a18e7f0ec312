import pytest
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from app.exceptions.custom import (
    AllDuplicateError,
    InvalidNameError,
    NoValidImagesError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from app.mappers.hotel_merger import ALLOWED_HOTELS
from app.services.hotels import HotelService


@pytest.fixture
def collection(mongo):
    return mongo["hotels"]


@pytest.fixture
def service(collection):
    return HotelService(collection)


async def test_upsert_creates_new_hotel(service, collection):
    result = await service.upsert(
        "Hotel SouthEnd", description="Beach front", images=["http://a", "http://a", ""]
    )

    assert result.created is True
    assert result.hotel.images == ["http://a"]
    assert result.hotel.id is not None
    assert await collection.count_documents({"name": "Hotel SouthEnd"}) == 1

    doc = await collection.find_one({"name": "Hotel SouthEnd"})
    assert doc["description"] == "Beach front"
    assert doc["images"] == ["http://a"]


async def test_upsert_accepts_single_image_string(service):
    result = await service.upsert("Hotel SouthEnd", images="http://a")

    assert result.hotel.images == ["http://a"]


async def test_upsert_merges_existing_images(service, collection):
    await collection.insert_one({"name": "X", "description": "d", "images": ["b", "c"]})

    result = await service.upsert("X", description="d", images=["a", "b"])

    assert result.created is False
    assert result.hotel.images == ["b", "c", "a"]
    assert result.added_images == ["a"]
    doc = await collection.find_one({"name": "X"})
    assert doc["images"] == ["b", "c", "a"]
    assert await collection.count_documents({}) == 1


async def test_upsert_second_call_appends_only_new(service):
    await service.upsert("X", images=["http://a"])
    result = await service.upsert("X", images=["http://a", "http://b"])

    assert result.hotel.images == ["http://a", "http://b"]


async def test_upsert_all_duplicates_is_not_an_error(service, collection):
    await collection.insert_one({"name": "X", "images": ["a", "b"]})

    result = await service.upsert("X", images=["b", "a"])

    assert result.hotel.images == ["a", "b"]
    assert result.added_images == []


async def test_upsert_overwrites_description_with_none_by_default(service, collection):
    await collection.insert_one({"name": "X", "description": "Old", "images": []})

    result = await service.upsert("X")

    assert result.hotel.description is None
    assert (await collection.find_one({"name": "X"}))["description"] is None


async def test_upsert_truthy_only_policy_keeps_description(collection):
    service = HotelService(collection, overwrite_description_on_empty=False)
    await collection.insert_one({"name": "X", "description": "Old", "images": []})

    result = await service.upsert("X", description="")

    assert result.hotel.description == "Old"
    assert (await collection.find_one({"name": "X"}))["description"] == "Old"


async def test_upsert_location_rules(service, collection):
    await collection.insert_one({"name": "X", "location": "Digha", "images": []})

    result = await service.upsert("X", location="")
    assert result.hotel.location == "Digha"

    result = await service.upsert("X", location="Old Digha")
    assert result.hotel.location == "Old Digha"


async def test_upsert_without_location_support(collection):
    service = HotelService(collection, with_location=False)

    result = await service.upsert("X", location="Digha")

    assert result.hotel.location is None
    assert "location" not in await collection.find_one({"name": "X"})


@pytest.mark.parametrize("name", [None, "", "   "])
async def test_upsert_requires_name(service, collection, name):
    with pytest.raises(ValidationError):
        await service.upsert(name, images=["http://a"])
    assert await collection.count_documents({}) == 0


async def test_allow_list_rejects_unknown_name_without_touching_store():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    service = HotelService(collection, allowed_names=ALLOWED_HOTELS)

    with pytest.raises(InvalidNameError):
        await service.upsert("Hotel Elsewhere")

    collection.find_one.assert_not_called()


async def test_allow_list_accepts_listed_name(collection):
    service = HotelService(collection, allowed_names=ALLOWED_HOTELS)

    result = await service.upsert("Mahamaya Dham", images=["http://a"])

    assert result.created is True


async def test_update_requires_existing_hotel(service):
    with pytest.raises(NotFoundError):
        await service.update("Missing", description="d")


async def test_update_merges(service, collection):
    await collection.insert_one({"name": "X", "images": ["a"]})

    hotel = await service.update("X", description="New", images="b")

    assert hotel.description == "New"
    assert hotel.images == ["a", "b"]


async def test_get_hotel_not_found(service):
    with pytest.raises(NotFoundError):
        await service.get_hotel("Missing")


async def test_list_hotels(service, collection):
    await collection.insert_many([{"name": "A", "images": []}, {"name": "B"}])

    hotels = await service.list_hotels()

    assert [h.name for h in hotels] == ["A", "B"]
    assert hotels[1].images == []


async def test_add_images_reports_new_only(service, collection):
    await collection.insert_one({"name": "X", "images": ["a"]})

    hotel, added = await service.add_images("X", ["a", "b", " ", "c"])

    assert added == ["b", "c"]
    assert hotel.images == ["a", "b", "c"]
    assert (await collection.find_one({"name": "X"}))["images"] == ["a", "b", "c"]


async def test_add_images_no_valid_images(service, collection):
    await collection.insert_one({"name": "X", "images": ["a"]})

    with pytest.raises(NoValidImagesError):
        await service.add_images("X", ["", None, 3])


async def test_add_images_all_duplicate(service, collection):
    await collection.insert_one({"name": "X", "images": ["a", "b"]})

    with pytest.raises(AllDuplicateError):
        await service.add_images("X", ["b", "a"])

    assert (await collection.find_one({"name": "X"}))["images"] == ["a", "b"]


async def test_add_images_unknown_hotel(service):
    with pytest.raises(NotFoundError):
        await service.add_images("Missing", ["a"])


async def test_remove_image_removes_every_occurrence(service, collection):
    await collection.insert_one({"name": "X", "images": ["a", "b", "a"]})

    hotel = await service.remove_image("X", "a")

    assert hotel.images == ["b"]
    assert (await collection.find_one({"name": "X"}))["images"] == ["b"]


async def test_remove_missing_image_is_noop(service, collection):
    await collection.insert_one({"name": "X", "images": ["a", "b"]})

    hotel = await service.remove_image("X", "zzz")

    assert hotel.images == ["a", "b"]


async def test_update_description_overwrites_unconditionally(service, collection):
    await collection.insert_one({"name": "X", "description": "Old", "images": []})

    hotel = await service.update_description("X", "")

    assert hotel.description == ""
    assert (await collection.find_one({"name": "X"}))["description"] == ""


async def test_delete_hotel(service, collection):
    await collection.insert_one({"name": "X", "images": []})

    await service.delete_hotel("X")

    assert await collection.count_documents({}) == 0


async def test_delete_missing_hotel(service):
    with pytest.raises(NotFoundError):
        await service.delete_hotel("Missing")


async def test_store_failure_is_wrapped():
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
    service = HotelService(collection)

    with pytest.raises(StoreError) as exc_info:
        await service.upsert("X")

    assert exc_info.value.dependency == "store"
