"""
Renderer inputs — one immutable model per document kind.

"today" and the generation date are always explicit so that rendering never
reads the clock.
"""

from datetime import date
from typing import Final, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from travel_docs.core.dates import parse_date
from travel_docs.core.domain.entities import AirGroup, Client, EntityId, Hotel, TravelPlan, Trip

AIR_GROUP_NAME_COLUMN: Final[str] = "nome_grupo"


class ContractInput(BaseModel):
    """Service contract for a chartered trip."""

    contractor: Client
    trip: Trip
    generated_on: date
    city: str = Field(default="", description="City printed in the closing and the forum clause")
    day_count: Optional[int] = Field(
        default=None, ge=0, description="Overrides the day count derived from the trip"
    )

    model_config = {"frozen": True}

    @field_validator("generated_on", mode="before")
    @classmethod
    def normalize_generated_on(cls, v: object) -> object:
        return parse_date(v) or v


class ManifestInput(BaseModel):
    """
    Passenger list of a trip or air group.

    Passengers are printed in the order given; use sort_passengers() for the
    usual alphabetical collation.
    """

    plan: TravelPlan
    passengers: tuple[Client, ...] = Field(default=())
    today: date
    contractor_id: Optional[EntityId] = Field(
        default=None, description="Defaults to the plan's contractor"
    )

    model_config = {"frozen": True}

    @field_validator("plan", mode="before")
    @classmethod
    def resolve_plan_type(cls, v: object) -> object:
        # A record reaching us as a mapping is an air group when it carries
        # the group name column, otherwise a trip
        if isinstance(v, TravelPlan) or not isinstance(v, Mapping):
            return v
        if AIR_GROUP_NAME_COLUMN in v:
            return AirGroup.model_validate(dict(v))
        return Trip.model_validate(dict(v))

    @property
    def responsible_id(self) -> Optional[EntityId]:
        if self.contractor_id is not None:
            return self.contractor_id
        return self.plan.contractor_id


class BirthdayReportInput(BaseModel):
    clients: tuple[Client, ...] = Field(default=())
    month: int = Field(..., ge=1, le=12)
    today: date

    model_config = {"frozen": True}


class HotelReportInput(BaseModel):
    country: str = Field(..., min_length=1)
    hotels: tuple[Hotel, ...] = Field(default=())

    model_config = {"frozen": True}
