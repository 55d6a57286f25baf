"""
Back-office reports — aniversariantes and hotel history

Birthday list:
    clients born in a month, ordered by day of month, with their age on
    `today`.

Hotels by country:
    reservations ordered by most recent check-in (no check-in last), with the
    BRL and EUR column totals as a footer row.
"""

from datetime import date

from travel_docs.core.amounts import ZERO
from travel_docs.core.dates import compute_age, format_date_br, month_name
from travel_docs.core.domain.document import (
    ClauseSection,
    DocumentContent,
    DocumentKind,
    FieldEntry,
    FieldSection,
    TableRow,
    TableSection,
)
from travel_docs.core.domain.entities import Client, Hotel
from travel_docs.core.money.formatting import CurrencyCode, format_currency
from travel_docs.documents.config import RendererConfig
from travel_docs.documents.inputs import BirthdayReportInput, HotelReportInput
from travel_docs.documents.templates import BIRTHDAY_TITLE, HOTEL_ORDER_NOTE, HOTEL_TITLE

BIRTHDAY_COLUMNS = ("Dia", "Nome Completo", "Data Nasc.", "Idade Completa", "Contato (Celular)")

HOTEL_COLUMNS = ("Hotel", "Check-in / Check-out", "Vínculo (Viagem/Grupo)", "Valor (R$)", "Valor (€)")


# =============================================================================
# BIRTHDAYS
# =============================================================================


def birthdays_in_month(clients: tuple[Client, ...], month: int) -> tuple[Client, ...]:
    """Clients born in `month`, by day, then by name."""
    born = [c for c in clients if c.birth_date is not None and c.birth_date.month == month]
    return tuple(
        sorted(
            born,
            key=lambda c: (c.birth_date.day, c.given_name.casefold(), c.family_name.casefold()),
        )
    )


def build_birthday_report(data: BirthdayReportInput, config: RendererConfig) -> DocumentContent:
    empty = config.empty_value
    clients = birthdays_in_month(data.clients, data.month)

    rows = []
    for client in clients:
        age = compute_age(client.birth_date, data.today)
        rows.append(
            TableRow(
                cells=(
                    f"{client.birth_date.day:02d}",
                    client.full_name,
                    format_date_br(client.birth_date, placeholder=empty),
                    f"{age} anos" if age is not None else empty,
                    client.phone or empty,
                )
            )
        )

    name = month_name(data.month)
    return DocumentContent(
        kind=DocumentKind.BIRTHDAY_REPORT,
        title=BIRTHDAY_TITLE.format(month_name=name),
        sections=(
            FieldSection(
                key="summary",
                heading="Relatório de Aniversariantes",
                fields=(
                    FieldEntry("Mês", name),
                    FieldEntry("Total de Aniversariantes", str(len(clients))),
                ),
            ),
            TableSection(
                key="birthdays",
                heading="Aniversariantes",
                columns=BIRTHDAY_COLUMNS,
                rows=tuple(rows),
            ),
        ),
    )


# =============================================================================
# HOTELS
# =============================================================================


def hotels_for_country(hotels: tuple[Hotel, ...], country: str) -> tuple[Hotel, ...]:
    """Reservations in `country` (case-insensitive), latest check-in first."""
    wanted = country.strip().casefold()
    matching = [h for h in hotels if h.country.casefold() == wanted]
    return tuple(sorted(matching, key=lambda h: h.check_in or date.min, reverse=True))


def build_hotel_report(data: HotelReportInput, config: RendererConfig) -> DocumentContent:
    empty = config.empty_value
    hotels = hotels_for_country(data.hotels, data.country)

    total_brl = sum((h.total_brl for h in hotels), ZERO)
    total_eur = sum((h.total_eur for h in hotels), ZERO)

    rows = tuple(
        TableRow(
            cells=(
                hotel.name,
                f"{format_date_br(hotel.check_in, placeholder=empty)} → "
                f"{format_date_br(hotel.check_out, placeholder=empty)}",
                hotel.link_label,
                format_currency(hotel.total_brl, CurrencyCode.BRL),
                format_currency(hotel.total_eur, CurrencyCode.EUR),
            )
        )
        for hotel in hotels
    )
    footer = TableRow(
        cells=(
            "Totais",
            "",
            "",
            format_currency(total_brl, CurrencyCode.BRL),
            format_currency(total_eur, CurrencyCode.EUR),
        ),
        highlighted=True,
    )

    return DocumentContent(
        kind=DocumentKind.HOTEL_REPORT,
        title=HOTEL_TITLE.format(country=data.country),
        sections=(
            FieldSection(
                key="summary",
                heading="Histórico de Hotéis",
                fields=(
                    FieldEntry("País", data.country),
                    FieldEntry("Total de Reservas", str(len(hotels))),
                ),
            ),
            TableSection(
                key="hotels",
                heading="Hotéis",
                columns=HOTEL_COLUMNS,
                rows=rows,
                footer=footer,
            ),
            ClauseSection(key="note", heading="", paragraphs=(HOTEL_ORDER_NOTE,)),
        ),
    )
