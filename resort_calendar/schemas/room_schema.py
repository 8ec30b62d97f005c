"""Room catalog data model."""

from pydantic import BaseModel, Field
from typing import Optional


class Room(BaseModel):
    """Bookable room record."""
    id: str
    room_number: str
    room_type: str = "Standard"
    description: str = ""
    capacity: int = Field(ge=1)
    price_per_night: float = Field(ge=0)
    amenities: list[str] = Field(default_factory=list)
    images: Optional[list[str]] = None
    is_available: bool = True
