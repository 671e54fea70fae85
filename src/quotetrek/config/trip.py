"""Trip parameters — the traveler-side input of one pricing call."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from quotetrek.config.fields import (
    Amount,
    BedSize,
    Count,
    Flag,
    OptionalId,
    OptionalText,
    none_to_empty_list,
    none_to_empty_mapping,
)

DESTINATIONS = ("makkah", "madina")


class DestinationStay(BaseModel):
    """Accommodation choices for one city (Makkah or Madina)."""

    hotel_id: OptionalId = Field(default=None, description="Selected hotel, if any")
    nights: Count = Field(default=0, description="Nights in this city")
    room_beds: BedSize = Field(
        default=2,
        description="Room bed-size (2/3/4/5).  The room's nightly price is "
                    "shared evenly across this many beds.",
    )
    meal_plan: OptionalText = Field(default=None, description="Meal plan name, matched exactly")
    laundry: Flag = Field(default=False, description="Laundry service included")


class TransportSelection(BaseModel):
    """One transport route and how many vehicles it needs."""

    route_id: OptionalId = None
    vehicle_count: Count = 1


class AddonSelection(BaseModel):
    """One add-on and how many units."""

    addon_id: OptionalId = None
    quantity: Count = 1


# `null` from a JSON client means "not filled in", same as omitting the key.
Stay = Annotated[DestinationStay, BeforeValidator(none_to_empty_mapping)]
TransportList = Annotated[list[TransportSelection], BeforeValidator(none_to_empty_list)]
AddonList = Annotated[list[AddonSelection], BeforeValidator(none_to_empty_list)]


class TripParameters(BaseModel):
    """Everything the engine needs to know about the travelers and their picks.

    Every numeric field is parsed leniently (see ``quotetrek.config.fields``),
    so a half-filled builder form always validates.
    """

    adults: Count = Field(default=1, description="Adult travelers")
    children: Count = Field(default=0, description="Child travelers")
    infants: Count = Field(default=0, description="Infants (free of per-head charges)")
    discount: Amount = Field(default=0.0, description="Flat discount off the subtotal")
    pricing_package_id: OptionalId = Field(default=None, description="Selected pricing package")
    makkah: Stay = Field(default_factory=DestinationStay)
    madina: Stay = Field(default_factory=DestinationStay)
    visa_id: OptionalId = Field(default=None, description="Selected visa type")
    transport: TransportList = Field(default_factory=list)
    addons: AddonList = Field(default_factory=list)

    @property
    def total_people(self) -> int:
        """Adults + children + infants."""
        return self.adults + self.children + self.infants

    @property
    def paying_travelers(self) -> int:
        """Adults + children.  Infants ride free."""
        return self.adults + self.children

    def stays(self) -> list[tuple[str, DestinationStay]]:
        """``(destination, stay)`` pairs in Makkah → Madina order."""
        return [(name, getattr(self, name)) for name in DESTINATIONS]
