"""
Entities — Client, Trip, AirGroup, Hotel

Immutable Pydantic models of the records the back-office keeps. The core only
reads them; they are created from persistence rows and never mutated.

Rows reach the core with the persistence column names (nome, sobrenome,
data_nascimento, data_ida, km_total, contratante_id, ...) and sometimes with
the camelCase names the forms use (dataNascimento, ufRg). Every field accepts
its own name plus those aliases, so `Client.model_validate(row)` works on a
raw row.

Normalization on the way in:
- NULL text columns become ""
- dates accept ISO or DD/MM/YYYY (unparseable → None)
- money/distance accept numbers or pt-BR text (unparseable → None)
- times are cut to HH:MM
"""

from datetime import date
from decimal import Decimal
from typing import Optional, Union

from pydantic import AliasChoices, AliasPath, BaseModel, Field, field_validator

from travel_docs.core.amounts import ZERO, parse_decimal
from travel_docs.core.dates import parse_date

EntityId = Union[int, str]


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(value: object) -> Optional[str]:
    text = _text(value)
    return text or None


def _time(value: object) -> Optional[str]:
    text = _text(value)
    if not text:
        return None
    # "08:30:00" → "08:30"
    if text.count(":") == 2:
        return text.rsplit(":", 1)[0]
    return text


def _optional_int(value: object) -> Optional[int]:
    parsed = parse_decimal(value)
    if parsed is None:
        return None
    return int(parsed)


# =============================================================================
# CLIENT
# =============================================================================


class Client(BaseModel):
    """
    Registered client (passenger, contracting party, card holder).

    tax_id is stored as typed by the operator; validity is enforced at data
    entry and again by the contract generation gate.
    """

    id: EntityId = Field(..., description="Client id")
    given_name: str = Field(
        ..., validation_alias=AliasChoices("given_name", "nome"), description="Nome"
    )
    family_name: str = Field(
        default="", validation_alias=AliasChoices("family_name", "sobrenome"), description="Sobrenome"
    )
    tax_id: str = Field(default="", validation_alias=AliasChoices("tax_id", "cpf"), description="CPF")
    rg: str = Field(default="", description="RG number")
    rg_state: str = Field(
        default="", validation_alias=AliasChoices("rg_state", "uf_rg", "ufRg"), description="RG issuing state"
    )
    birth_date: Optional[date] = Field(
        default=None,
        validation_alias=AliasChoices("birth_date", "data_nascimento", "dataNascimento"),
    )
    phone: str = Field(default="", validation_alias=AliasChoices("phone", "celular"), description="Celular")
    email: str = Field(default="")
    passport: str = Field(default="", validation_alias=AliasChoices("passport", "passaporte"))

    model_config = {"frozen": True}

    @field_validator("given_name", "family_name", "tax_id", "rg", "rg_state", "phone", "email", "passport", mode="before")
    @classmethod
    def normalize_text(cls, v: object) -> str:
        return _text(v)

    @field_validator("birth_date", mode="before")
    @classmethod
    def normalize_birth_date(cls, v: object) -> Optional[date]:
        return parse_date(v)

    @property
    def full_name(self) -> str:
        """Given and family name, single-spaced."""
        return f"{self.given_name} {self.family_name}".strip()


# =============================================================================
# TRAVEL PLANS
# =============================================================================


class TravelPlan(BaseModel):
    """
    Fields shared by everything a passenger list can be printed for.

    Schedule fields are optional: documents print blank slots for them.
    """

    id: EntityId = Field(..., description="Record id")
    name: str = Field(default="")
    origin: str = Field(default="", validation_alias=AliasChoices("origin", "origem"))
    destination: str = Field(default="", validation_alias=AliasChoices("destination", "destino"))
    departure_date: Optional[date] = Field(
        default=None, validation_alias=AliasChoices("departure_date", "data_ida")
    )
    departure_time: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("departure_time", "hora_ida")
    )
    return_date: Optional[date] = Field(
        default=None, validation_alias=AliasChoices("return_date", "data_volta")
    )
    return_time: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("return_time", "hora_volta")
    )
    itinerary: str = Field(default="", validation_alias=AliasChoices("itinerary", "roteiro"))
    contractor_id: Optional[EntityId] = Field(
        default=None,
        validation_alias=AliasChoices("contractor_id", "contratante_id"),
        description="Id of the client responsible for the trip",
    )

    model_config = {"frozen": True}

    @field_validator("name", "origin", "destination", "itinerary", mode="before")
    @classmethod
    def normalize_text(cls, v: object) -> str:
        return _text(v)

    @field_validator("departure_date", "return_date", mode="before")
    @classmethod
    def normalize_dates(cls, v: object) -> Optional[date]:
        return parse_date(v)

    @field_validator("departure_time", "return_time", mode="before")
    @classmethod
    def normalize_times(cls, v: object) -> Optional[str]:
        return _time(v)

    @field_validator("contractor_id", mode="before")
    @classmethod
    def normalize_contractor(cls, v: object) -> Optional[EntityId]:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Trip(TravelPlan):
    """
    Chartered road trip (viagem) with its pricing inputs.

    day_count is the externally supplied count, used when the dates do not
    allow computing it.
    """

    name: str = Field(default="", validation_alias=AliasChoices("name", "nome_viagem"))
    distance_km: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("distance_km", "km_total")
    )
    day_count: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("day_count", "dias_total")
    )
    daily_rate: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("daily_rate", "valor_diaria")
    )
    per_km_rate: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("per_km_rate", "valor_km")
    )
    guide_daily_rate: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("guide_daily_rate", "valor_diaria_guia")
    )

    @field_validator("distance_km", "daily_rate", "per_km_rate", "guide_daily_rate", mode="before")
    @classmethod
    def normalize_amounts(cls, v: object) -> Optional[Decimal]:
        return parse_decimal(v)

    @field_validator("day_count", mode="before")
    @classmethod
    def normalize_day_count(cls, v: object) -> Optional[int]:
        return _optional_int(v)


class AirGroup(TravelPlan):
    """Air travel group (grupo aéreo)."""

    name: str = Field(default="", validation_alias=AliasChoices("name", "nome_grupo"))


# =============================================================================
# HOTEL
# =============================================================================


class Hotel(BaseModel):
    """
    Hotel reservation linked to a trip or an air group.

    trip_name / group_name come from the joined parent record, when present.
    """

    id: Optional[EntityId] = Field(default=None)
    name: str = Field(default="", validation_alias=AliasChoices("name", "nome_hotel"))
    check_in: Optional[date] = Field(default=None)
    check_out: Optional[date] = Field(default=None)
    total_brl: Decimal = Field(default=ZERO, validation_alias=AliasChoices("total_brl", "valor_total_brl"))
    total_eur: Decimal = Field(default=ZERO, validation_alias=AliasChoices("total_eur", "valor_total_eur"))
    country: str = Field(default="", validation_alias=AliasChoices("country", "pais"))
    trip_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("trip_name", AliasPath("viagens", "nome_viagem")),
    )
    group_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("group_name", AliasPath("grupos_aereos", "nome_grupo")),
    )

    model_config = {"frozen": True}

    @field_validator("name", "country", mode="before")
    @classmethod
    def normalize_text(cls, v: object) -> str:
        return _text(v)

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def normalize_dates(cls, v: object) -> Optional[date]:
        return parse_date(v)

    @field_validator("total_brl", "total_eur", mode="before")
    @classmethod
    def normalize_amounts(cls, v: object) -> Decimal:
        parsed = parse_decimal(v)
        return ZERO if parsed is None else parsed

    @field_validator("trip_name", "group_name", mode="before")
    @classmethod
    def normalize_link(cls, v: object) -> Optional[str]:
        return _optional_text(v)

    @property
    def link_label(self) -> str:
        """Where the reservation belongs: "Viagem: X", "Grupo: Y" or "-"."""
        if self.trip_name:
            return f"Viagem: {self.trip_name}"
        if self.group_name:
            return f"Grupo: {self.group_name}"
        return "-"
