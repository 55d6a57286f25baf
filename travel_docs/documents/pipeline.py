"""
Generation pipeline

Runs the full chain for a document from entity records:

    contract: CPF gate → day count → cost accumulation → verbalization → render

The CPF gate is the last line of defence before a contract leaves the
agency: a contractor with an invalid CPF gets InvalidTaxIdError ("CPF
inválido.") and no document.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from travel_docs.core.domain.debit import DebitAuthorizationRequest
from travel_docs.core.domain.document import DocumentContent, DocumentKind
from travel_docs.core.domain.entities import Client, EntityId, TravelPlan, Trip
from travel_docs.core.money.costs import accumulate_trip, resolve_day_count
from travel_docs.core.money.verbalizer import verbalize
from travel_docs.core.validation.tax_id import require_valid_tax_id
from travel_docs.documents.inputs import ContractInput, ManifestInput
from travel_docs.documents.renderer import DocumentRenderer

logger = logging.getLogger(__name__)


def generate_contract(
    trip: Trip,
    contractor: Client,
    generated_on: date,
    city: str = "",
    days: Optional[int] = None,
    renderer: Optional[DocumentRenderer] = None,
) -> DocumentContent:
    """
    Contract for a trip, priced from its rates.

    Args:
        trip: Trip with its rates and schedule
        contractor: Contracting client
        generated_on: Generation date (contract number and closing date)
        city: City for the closing line and forum clause
        days: Day count override; derived from the trip when omitted
        renderer: Renderer to use; default configuration when omitted

    Raises:
        ValueError: Negative day count override
        InvalidTaxIdError: Contractor CPF fails the checksum
        AmountOutOfRangeError: Total cannot be verbalized
    """
    if days is not None and days < 0:
        raise ValueError(f"days must be >= 0, got {days}")
    require_valid_tax_id(contractor.tax_id)

    day_count = days if days is not None else resolve_day_count(trip)
    breakdown = accumulate_trip(trip, day_count)
    words = verbalize(breakdown.total)

    logger.info(
        "Generating contract for trip %s: %s days, total %s", trip.id, day_count, breakdown.total
    )

    renderer = renderer or DocumentRenderer()
    return renderer.render(
        DocumentKind.CONTRACT,
        ContractInput(
            contractor=contractor,
            trip=trip,
            generated_on=generated_on,
            city=city,
            day_count=day_count,
        ),
        breakdown=breakdown,
        verbalized_total=words,
    )


def generate_manifest(
    plan: TravelPlan,
    passengers: Iterable[Client],
    today: date,
    contractor_id: Optional[EntityId] = None,
    renderer: Optional[DocumentRenderer] = None,
) -> DocumentContent:
    """Passenger list in the order given (see sort_passengers)."""
    renderer = renderer or DocumentRenderer()
    return renderer.render(
        DocumentKind.PASSENGER_MANIFEST,
        ManifestInput(
            plan=plan,
            passengers=tuple(passengers),
            today=today,
            contractor_id=contractor_id,
        ),
    )


def generate_debit_authorization(
    request: DebitAuthorizationRequest,
    renderer: Optional[DocumentRenderer] = None,
) -> DocumentContent:
    renderer = renderer or DocumentRenderer()
    return renderer.render(DocumentKind.DEBIT_AUTHORIZATION, request)
