"""
Domain models and value objects.

Contains the back-office entities (Client, Trip, AirGroup, Hotel), the debit
authorization request, and the rendered document model.
"""

from travel_docs.core.domain.debit import (
    MAX_TRAVELERS,
    CardBrand,
    DebitAuthorizationRequest,
    PaymentCurrency,
    TravelerLimitExceededError,
    TravelerSelection,
    holder_fields_from_client,
    route_for,
)
from travel_docs.core.domain.document import (
    ChoiceOption,
    ChoiceSection,
    ClauseSection,
    DocumentContent,
    DocumentKind,
    FieldEntry,
    FieldSection,
    Section,
    TableRow,
    TableSection,
)
from travel_docs.core.domain.entities import (
    AirGroup,
    Client,
    EntityId,
    Hotel,
    TravelPlan,
    Trip,
)

__all__ = [
    # Entities
    "AirGroup",
    "Client",
    "EntityId",
    "Hotel",
    "TravelPlan",
    "Trip",
    # Debit authorization
    "MAX_TRAVELERS",
    "CardBrand",
    "DebitAuthorizationRequest",
    "PaymentCurrency",
    "TravelerLimitExceededError",
    "TravelerSelection",
    "holder_fields_from_client",
    "route_for",
    # Document model
    "ChoiceOption",
    "ChoiceSection",
    "ClauseSection",
    "DocumentContent",
    "DocumentKind",
    "FieldEntry",
    "FieldSection",
    "Section",
    "TableRow",
    "TableSection",
]
