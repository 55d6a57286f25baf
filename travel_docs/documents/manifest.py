"""
Passenger manifest — lista de passageiros

Header with the plan's route and schedule, the itinerary (when filled in),
the responsible party, and one table row per passenger in the order given.
The responsible passenger's row is highlighted and marked "(Resp.)".
"""

from typing import Iterable, Optional

from travel_docs.core.dates import compute_age, format_date_br
from travel_docs.core.domain.document import (
    DocumentContent,
    DocumentKind,
    FieldEntry,
    FieldSection,
    Section,
    TableRow,
    TableSection,
)
from travel_docs.core.domain.entities import AirGroup, Client, EntityId
from travel_docs.core.validation.tax_id import format_tax_id
from travel_docs.documents.config import RendererConfig
from travel_docs.documents.inputs import ManifestInput
from travel_docs.documents.templates import MANIFEST_ITINERARY, MANIFEST_TITLE, fill

PASSENGER_COLUMNS = ("#", "Nome Completo", "CPF", "RG", "Nascimento", "Idade", "Celular")


def sort_passengers(passengers: Iterable[Client]) -> tuple[Client, ...]:
    """Alphabetical by given name, then family name, ignoring case."""
    return tuple(
        sorted(passengers, key=lambda c: (c.given_name.casefold(), c.family_name.casefold()))
    )


def _same_id(left: Optional[EntityId], right: Optional[EntityId]) -> bool:
    # Ids arrive as int from one source and str from another
    if left is None or right is None:
        return False
    return str(left) == str(right)


def _schedule(date_value: object, time_value: Optional[str], empty: str) -> str:
    date_text = format_date_br(date_value, placeholder=empty)
    return f"{date_text} {time_value or empty}"


def passenger_row(
    index: int, passenger: Client, data: ManifestInput, config: RendererConfig
) -> TableRow:
    empty = config.empty_value
    responsible = _same_id(passenger.id, data.responsible_id)
    name = passenger.full_name
    if responsible:
        name = f"{name} {config.responsible_marker}"
    age = compute_age(passenger.birth_date, data.today)
    return TableRow(
        cells=(
            str(index),
            name,
            format_tax_id(passenger.tax_id) or empty,
            passenger.rg or empty,
            format_date_br(passenger.birth_date, placeholder=empty),
            str(age) if age is not None else empty,
            passenger.phone or empty,
        ),
        highlighted=responsible,
    )


def build_manifest(data: ManifestInput, config: RendererConfig) -> DocumentContent:
    plan = data.plan
    empty = config.empty_value
    plan_label = "Grupo" if isinstance(plan, AirGroup) else "Viagem"

    sections: list[Section] = [
        FieldSection(
            key="header",
            heading=plan_label,
            fields=(
                FieldEntry(plan_label, plan.name or empty),
                FieldEntry("Total Passageiros", str(len(data.passengers))),
                FieldEntry("Cidade de Origem", plan.origin or empty),
                FieldEntry("Cidade de Destino", plan.destination or empty),
                FieldEntry("Data/Hora Partida", _schedule(plan.departure_date, plan.departure_time, empty)),
                FieldEntry("Data/Hora Retorno", _schedule(plan.return_date, plan.return_time, empty)),
            ),
        )
    ]

    if plan.itinerary:
        sections.append(fill(MANIFEST_ITINERARY, {"itinerary": plan.itinerary}))

    if data.responsible_id is not None:
        responsible = next(
            (p for p in data.passengers if _same_id(p.id, data.responsible_id)), None
        )
        sections.append(
            FieldSection(
                key="responsible",
                heading="Contratante Responsável",
                fields=(
                    FieldEntry(
                        "Contratante Responsável",
                        responsible.full_name if responsible else empty,
                    ),
                ),
            )
        )

    sections.append(
        TableSection(
            key="passengers",
            heading="Lista de Passageiros",
            columns=PASSENGER_COLUMNS,
            rows=tuple(
                passenger_row(index, passenger, data, config)
                for index, passenger in enumerate(data.passengers, start=1)
            ),
        )
    )

    return DocumentContent(
        kind=DocumentKind.PASSENGER_MANIFEST,
        title=MANIFEST_TITLE.format(trip_name=plan.name or empty),
        sections=tuple(sections),
    )
