"""
Debit Authorization — card debit form for travel services

Immutable model of the "Autorização de Débito" form filled in for an air
group, plus the traveler-selection helper used while the operator ticks
names on the form.

HARD LIMIT:
    The printed layout has exactly MAX_TRAVELERS (6) traveler slots. A 7th
    selection is rejected when it is made (TravelerSelection.add) and a
    request carrying more than 6 names cannot be constructed. Names are never
    silently truncated.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Final, Iterable, Iterator, Optional

from pydantic import BaseModel, Field, field_validator

from travel_docs.core.amounts import parse_decimal
from travel_docs.core.dates import parse_date
from travel_docs.core.domain.entities import Client, TravelPlan

MAX_TRAVELERS: Final[int] = 6


# =============================================================================
# ENUMS
# =============================================================================


class CardBrand(str, Enum):
    """Card brands printed as checkboxes on the form."""

    VISA = "Visa"
    AMEX = "Amex"
    DINERS = "Diners"
    MASTERCARD = "Master"

    @property
    def label(self) -> str:
        return _CARD_BRAND_LABELS[self]


_CARD_BRAND_LABELS: Final[dict[CardBrand, str]] = {
    CardBrand.VISA: "Visa",
    CardBrand.AMEX: "American Express",
    CardBrand.DINERS: "Diners",
    CardBrand.MASTERCARD: "MasterCard",
}


class PaymentCurrency(str, Enum):
    """Currency of the debited amounts."""

    BRL = "BRL"
    USD = "USD"

    @property
    def label(self) -> str:
        if self is PaymentCurrency.BRL:
            return "R$ - Real"
        return "US$ - Dólar"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TravelerLimitExceededError(ValueError):
    """A traveler beyond the printable slots was selected."""

    def __init__(self, name: str, limit: int = MAX_TRAVELERS):
        super().__init__(f"Máximo de {limit} viajantes permitidos (rejected: {name!r})")
        self.name = name
        self.limit = limit


# =============================================================================
# TRAVELER SELECTION
# =============================================================================


class TravelerSelection:
    """
    Ordered, duplicate-free selection of traveler names.

    Mutable on purpose: it mirrors the operator ticking names one at a time.
    Freeze it with `names` before building a DebitAuthorizationRequest.
    """

    def __init__(self, names: Iterable[str] = (), limit: int = MAX_TRAVELERS):
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self.limit = limit
        self._names: list[str] = []
        for name in names:
            self.add(name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    @property
    def is_full(self) -> bool:
        return len(self._names) >= self.limit

    def add(self, name: str) -> None:
        """
        Select a traveler.

        Already-selected names are ignored.

        Raises:
            TravelerLimitExceededError: If the selection is already full
        """
        if name in self._names:
            return
        if self.is_full:
            raise TravelerLimitExceededError(name, self.limit)
        self._names.append(name)

    def remove(self, name: str) -> None:
        """Deselect a traveler; unknown names are ignored."""
        if name in self._names:
            self._names.remove(name)

    def toggle(self, name: str) -> None:
        """Deselect if selected, otherwise select (may raise on a full list)."""
        if name in self._names:
            self.remove(name)
        else:
            self.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


# =============================================================================
# REQUEST MODEL
# =============================================================================


class DebitAuthorizationRequest(BaseModel):
    """
    Every field printed on the debit authorization.

    Text fields may be empty: the form prints an empty box for them.
    """

    issue_date: date = Field(..., description="Data de emissão")
    card_brand: Optional[CardBrand] = Field(default=None)

    # Card and holder
    card_number: str = Field(default="")
    issuing_bank: str = Field(default="")
    holder_name: str = Field(default="")
    card_expiry: str = Field(default="", description="MM/AA")
    holder_tax_id: str = Field(default="")
    holder_rg: str = Field(default="")
    security_code: str = Field(default="")
    holder_birth_date: Optional[date] = Field(default=None)
    holder_phone: str = Field(default="")

    # Travel
    airline: str = Field(default="")
    route: str = Field(default="", description="Trecho aéreo, e.g. 'GRU / LIS'")
    authorization_code: str = Field(default="")
    travel_date: Optional[date] = Field(default=None)

    # Amounts
    currency: PaymentCurrency = Field(default=PaymentCurrency.BRL)
    total_amount: Optional[Decimal] = Field(default=None, ge=0)
    fees_amount: Optional[Decimal] = Field(default=None, ge=0)
    installment_amount: Optional[Decimal] = Field(default=None, ge=0)
    installments: Optional[int] = Field(default=None, ge=1)

    travelers: tuple[str, ...] = Field(default=())

    model_config = {"frozen": True}

    @field_validator("issue_date", "holder_birth_date", "travel_date", mode="before")
    @classmethod
    def normalize_dates(cls, v: object) -> object:
        parsed = parse_date(v)
        # Leave unparseable input to pydantic so a required date still fails
        return v if parsed is None and v not in (None, "") else parsed

    @field_validator("total_amount", "fees_amount", "installment_amount", mode="before")
    @classmethod
    def normalize_amounts(cls, v: object) -> Optional[Decimal]:
        return parse_decimal(v)

    @field_validator("installments", mode="before")
    @classmethod
    def normalize_installments(cls, v: object) -> object:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("travelers", mode="before")
    @classmethod
    def normalize_travelers(cls, v: object) -> object:
        if isinstance(v, TravelerSelection):
            return v.names
        if v is None:
            return ()
        return v

    @field_validator("travelers")
    @classmethod
    def validate_traveler_limit(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        names = tuple(name.strip() for name in v if name and name.strip())
        if len(names) > MAX_TRAVELERS:
            raise ValueError(f"at most {MAX_TRAVELERS} travelers fit the form, got {len(names)}")
        return names


# =============================================================================
# PREFILL HELPERS
# =============================================================================


def holder_fields_from_client(client: Client) -> dict[str, object]:
    """
    Card-holder block pre-filled from a passenger.

    The holder name is printed upper-case, as on the card.
    """
    return {
        "holder_name": client.full_name.upper(),
        "holder_tax_id": client.tax_id,
        "holder_rg": client.rg,
        "holder_birth_date": client.birth_date,
        "holder_phone": client.phone,
    }


def route_for(plan: TravelPlan) -> str:
    """Default route text for a group: "ORIGEM / DESTINO"."""
    return f"{plan.origin} / {plan.destination}"
