"""
Mock room catalog.

In production, this would read the ``rooms`` table of the hosted
database. Lookups and explore-screen filtering happen client-side over
the fetched rows.
"""

import logging
from typing import Optional

from resort_calendar.schemas.room_schema import Room

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"
DEFAULT_ROOM_TYPE = "Standard"


class RoomNotFoundError(LookupError):
    """Raised when a room id is not in the catalog."""


_SEED_ROOMS: list[Room] = [
    Room(
        id="room-101",
        room_number="101",
        room_type="Standard",
        description="Garden view room with a queen bed.",
        capacity=2,
        price_per_night=100.0,
        amenities=["wifi", "air conditioning"],
    ),
    Room(
        id="room-204",
        room_number="204",
        room_type="Deluxe",
        description="Ocean view room with balcony and king bed.",
        capacity=3,
        price_per_night=180.0,
        amenities=["wifi", "balcony", "minibar"],
    ),
    Room(
        id="room-301",
        room_number="301",
        room_type="Suite",
        description="Two-bedroom family suite with private pool access.",
        capacity=5,
        price_per_night=320.5,
        amenities=["wifi", "pool access", "kitchenette"],
    ),
    Room(
        id="room-305",
        room_number="305",
        room_type="Suite",
        description="Honeymoon suite, currently closed for renovation.",
        capacity=2,
        price_per_night=290.0,
        is_available=False,
    ),
]

_rooms: dict[str, Room] = {}


def get_room(room_id: str) -> Optional[Room]:
    """Look up a room by id. Returns None if not found."""
    return _rooms.get(room_id)


def _require_room(room_id: str) -> Room:
    room = _rooms.get(room_id)
    if room is None:
        raise RoomNotFoundError(f"Room {room_id} not found.")
    return room


def fetch_nightly_rate(room_id: str) -> float:
    return _require_room(room_id).price_per_night


def fetch_capacity(room_id: str) -> int:
    return _require_room(room_id).capacity


def get_all_rooms() -> list[Room]:
    """All rooms ordered by room type, then room number."""
    return sorted(_rooms.values(), key=lambda r: (r.room_type, r.room_number))


def get_room_categories() -> list[str]:
    """Category tabs: ``All`` followed by each room type in catalog order."""
    categories = [ALL_CATEGORIES]
    for room in get_all_rooms():
        room_type = room.room_type or DEFAULT_ROOM_TYPE
        if room_type not in categories:
            categories.append(room_type)
    return categories


def search_rooms(
    query: str = "",
    category: str = ALL_CATEGORIES,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    min_capacity: Optional[int] = None,
) -> list[Room]:
    """Filter the catalog the way the explore screen does.

    The query matches case-insensitively against room number, type and
    description. Unset bounds do not filter.
    """
    needle = query.strip().lower()
    results = []
    for room in get_all_rooms():
        if needle and not (
            needle in room.room_number.lower()
            or needle in (room.room_type or "").lower()
            or needle in room.description.lower()
        ):
            continue
        if category != ALL_CATEGORIES and (room.room_type or DEFAULT_ROOM_TYPE) != category:
            continue
        if min_price is not None and room.price_per_night < min_price:
            continue
        if max_price is not None and room.price_per_night > max_price:
            continue
        if min_capacity and room.capacity < min_capacity:
            continue
        results.append(room)
    return results


def reset() -> None:
    """Restore the seeded catalog. Used by test fixtures for isolation."""
    _rooms.clear()
    for room in _SEED_ROOMS:
        _rooms[room.id] = room


reset()
