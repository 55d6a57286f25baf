"""
Service Contract — contrato de prestação de serviços

Fills the contract clause templates from the contracting client, the trip,
its cost breakdown and the verbalized total.

Unfilled itinerary slots print as blanks to be completed by hand:
    date "___/___/______", time "___:___", text "____________________"
"""

from decimal import Decimal
from typing import Optional

from travel_docs.core.amounts import ZERO
from travel_docs.core.dates import format_date_br, format_date_long
from travel_docs.core.domain.document import DocumentContent, DocumentKind
from travel_docs.core.money.costs import CostBreakdown, coerce_non_negative, resolve_day_count
from travel_docs.core.money.formatting import format_brl, group_thousands
from travel_docs.core.validation.tax_id import format_tax_id
from travel_docs.documents.config import RendererConfig
from travel_docs.documents.inputs import ContractInput
from travel_docs.documents.templates import (
    CONTRACT_CLAUSES,
    CONTRACT_SIGNATURES,
    CONTRACT_TITLE,
    fill,
)

SIGNATURE_LINE = "_" * 40


def contract_number(data: ContractInput) -> str:
    """YYYYMMDD of the generation date."""
    return data.generated_on.strftime("%Y%m%d")


def format_quantity(value: Optional[Decimal]) -> str:
    """Whole quantities without decimals ("1.200"), others with two ("12,50")."""
    value = ZERO if value is None else value
    if value == value.to_integral_value():
        return f"{int(value):,}".replace(",", ".")
    return group_thousands(value)


def _agency_identity(config: RendererConfig) -> str:
    agency = config.agency
    text = agency.display_name
    if agency.tax_number:
        text += f", inscrita no CNPJ sob o nº {agency.tax_number}"
    if agency.address:
        text += f", com sede em {agency.address}"
    return text


def contract_fields(
    data: ContractInput,
    breakdown: CostBreakdown,
    verbalized_total: str,
    config: RendererConfig,
) -> dict[str, str]:
    """Placeholder values for every contract template."""
    client = data.contractor
    trip = data.trip
    blank = config.blank_text

    rg = client.rg
    if rg and client.rg_state:
        rg = f"{rg}/{client.rg_state.upper()}"

    days = data.day_count if data.day_count is not None else resolve_day_count(trip)

    return {
        "contract_number": contract_number(data),
        "agency_identity": _agency_identity(config),
        "agency_name": config.agency.display_name,
        "contractor_name": client.full_name or blank,
        "contractor_tax_id": format_tax_id(client.tax_id) or blank,
        "contractor_rg": rg or blank,
        "contractor_phone": client.phone or blank,
        "trip_name": trip.name or blank,
        "origin": trip.origin or blank,
        "destination": trip.destination or blank,
        "itinerary": trip.itinerary or blank,
        "departure_date": format_date_br(trip.departure_date, placeholder=config.blank_date),
        "departure_time": trip.departure_time or config.blank_time,
        "return_date": format_date_br(trip.return_date, placeholder=config.blank_date),
        "return_time": trip.return_time or config.blank_time,
        "day_count": str(days) if days else blank,
        "distance_km": format_quantity(coerce_non_negative(trip.distance_km, "distance_km")),
        "total": format_brl(breakdown.total),
        "total_in_words": verbalized_total,
        "daily_subtotal": format_brl(breakdown.daily_subtotal),
        "km_subtotal": format_brl(breakdown.km_subtotal),
        "guide_subtotal": format_brl(breakdown.guide_subtotal),
        "city": data.city or config.agency.city or blank,
        "generated_on_long": format_date_long(data.generated_on),
        "signature_line": SIGNATURE_LINE,
    }


def build_contract(
    data: ContractInput,
    breakdown: CostBreakdown,
    verbalized_total: str,
    config: RendererConfig,
) -> DocumentContent:
    """
    Contract document: title with the contract number, the numbered clauses
    in order, then the signature block.
    """
    fields = contract_fields(data, breakdown, verbalized_total, config)
    sections = tuple(fill(template, fields) for template in CONTRACT_CLAUSES)
    return DocumentContent(
        kind=DocumentKind.CONTRACT,
        title=CONTRACT_TITLE.format_map(fields),
        sections=sections + (fill(CONTRACT_SIGNATURES, fields),),
    )
