from typing import Any, Iterable

from app.schemas.hotel import Hotel

ALLOWED_HOTELS = (
    "Hotel SouthEnd",
    "Hotel Surf Ride Digha",
    "Hotel Rupsagar",
    "Mahamaya Dham",
)


def _is_empty(value: str | None) -> bool:
    return value is None or value.strip() == ""


def valid_images(images: Any) -> list[str]:
    """Keep the non-blank string entries of ``images``, in order.

    A bare string is treated as a one-element list; any other non-list
    value yields no images.
    """
    if isinstance(images, str):
        images = [images]
    elif not isinstance(images, (list, tuple)):
        return []
    return [img for img in images if isinstance(img, str) and img.strip() != ""]


def new_images(existing: Iterable[str], candidates: Iterable[str]) -> list[str]:
    """Candidates absent from ``existing``, first occurrence order, no repeats."""
    seen = set(existing)
    added: list[str] = []
    for img in candidates:
        if img in seen:
            continue
        seen.add(img)
        added.append(img)
    return added


def merge_hotel(
    current: Hotel,
    description: str | None,
    location: str | None,
    images: list[str],
    overwrite_description_on_empty: bool = True,
    with_location: bool = True,
) -> tuple[dict[str, Any], list[str]]:
    """Merge an upsert payload into an existing hotel.

    ``images`` must already be filtered with :func:`valid_images`.
    Returns (fields_to_set, newly_added_images).
    """
    updates: dict[str, Any] = {}

    if overwrite_description_on_empty or not _is_empty(description):
        updates["description"] = description

    if with_location and not _is_empty(location):
        updates["location"] = location

    added = new_images(current.images, images)
    if added:
        updates["images"] = [*current.images, *added]

    return updates, added
