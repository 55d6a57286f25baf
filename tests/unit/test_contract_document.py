"""
Unit tests for the service contract document

Checks:
1. Contract number from the generation date
2. Clause order and wording with filled placeholders
3. Price clause: numeric total, verbalized total and subtotals
4. Blank slots for an itinerary without dates/times
"""

from datetime import date
from decimal import Decimal

import pytest

from travel_docs.core.domain import Client, ClauseSection, DocumentKind, Trip
from travel_docs.core.money import CostBreakdown, accumulate_trip, verbalize
from travel_docs.documents import (
    AgencyProfile,
    ContractInput,
    DocumentRenderer,
    RendererConfig,
)
from travel_docs.documents.contract import format_quantity


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def contractor() -> Client:
    return Client.model_validate(
        {
            "id": 7,
            "nome": "Ana",
            "sobrenome": "Souza",
            "cpf": "52998224725",
            "rg": "12.345.678-9",
            "uf_rg": "pr",
            "celular": "41 99999-0000",
        }
    )


@pytest.fixture
def trip() -> Trip:
    return Trip.model_validate(
        {
            "id": 3,
            "nome_viagem": "Foz do Iguaçu",
            "origem": "Curitiba",
            "destino": "Foz do Iguaçu",
            "data_ida": "2024-01-10",
            "hora_ida": "06:00:00",
            "data_volta": "2024-01-14",
            "hora_volta": "22:00",
            "roteiro": "Cataratas e Itaipu",
            "contratante_id": 7,
            "km_total": "200",
            "valor_diaria": "500",
            "valor_km": "2",
            "valor_diaria_guia": "150",
        }
    )


@pytest.fixture
def renderer() -> DocumentRenderer:
    return DocumentRenderer(
        RendererConfig(
            agency=AgencyProfile(
                name="Viagens Exemplo", tax_number="00.000.000/0001-00", city="Curitiba"
            )
        )
    )


def render_contract(renderer: DocumentRenderer, contractor: Client, trip: Trip, **kwargs):
    breakdown = accumulate_trip(trip)
    data = ContractInput(contractor=contractor, trip=trip, generated_on=date(2024, 3, 5), **kwargs)
    return renderer.render(
        DocumentKind.CONTRACT, data, breakdown=breakdown, verbalized_total=verbalize(breakdown.total)
    )


def paragraphs(content, key: str) -> tuple[str, ...]:
    section = content.section(key)
    assert isinstance(section, ClauseSection)
    return section.paragraphs


# =============================================================================
# TESTS
# =============================================================================


class TestContractDocument:
    def test_title_has_contract_number(self, renderer, contractor, trip) -> None:
        content = render_contract(renderer, contractor, trip)
        assert content.kind is DocumentKind.CONTRACT
        assert content.title == "CONTRATO DE PRESTAÇÃO DE SERVIÇOS DE TRANSPORTE Nº 20240305"

    def test_clause_order(self, renderer, contractor, trip) -> None:
        content = render_contract(renderer, contractor, trip)
        assert content.section_keys == (
            "parties",
            "object",
            "schedule",
            "price",
            "obligations",
            "cancellation",
            "forum",
            "signatures",
        )

    def test_parties(self, renderer, contractor, trip) -> None:
        contratada, contratante = paragraphs(render_contract(renderer, contractor, trip), "parties")
        assert contratada == "CONTRATADA: Viagens Exemplo, inscrita no CNPJ sob o nº 00.000.000/0001-00."
        assert "Ana Souza" in contratante
        assert "529.982.247-25" in contratante
        assert "12.345.678-9/PR" in contratante
        assert "41 99999-0000" in contratante

    def test_price_clause(self, renderer, contractor, trip) -> None:
        price = paragraphs(render_contract(renderer, contractor, trip), "price")
        assert price == (
            "Pelos serviços contratados, o CONTRATANTE pagará à CONTRATADA o valor total de "
            "R$ 3.650,00 (três mil e seiscentos e cinquenta reais), assim discriminado:",
            "a) Diárias do veículo: R$ 2.500,00;",
            "b) Quilometragem (200 km): R$ 400,00;",
            "c) Diárias do guia: R$ 750,00.",
        )

    def test_schedule(self, renderer, contractor, trip) -> None:
        assert paragraphs(render_contract(renderer, contractor, trip), "schedule") == (
            "Partida em 10/01/2024, às 06:00.",
            "Retorno em 14/01/2024, às 22:00.",
            "Total de diárias contratadas: 5.",
        )

    def test_object_itinerary(self, renderer, contractor, trip) -> None:
        obj = paragraphs(render_contract(renderer, contractor, trip), "object")
        assert '"Foz do Iguaçu"' in obj[0]
        assert obj[1] == "Roteiro: Cataratas e Itaipu"

    def test_city_defaults_to_agency(self, renderer, contractor, trip) -> None:
        content = render_contract(renderer, contractor, trip)
        assert "comarca de Curitiba" in paragraphs(content, "forum")[0]
        assert paragraphs(content, "signatures")[0] == "Curitiba, 5 de março de 2024."

    def test_explicit_city(self, renderer, contractor, trip) -> None:
        content = render_contract(renderer, contractor, trip, city="Londrina")
        assert paragraphs(content, "signatures")[0] == "Londrina, 5 de março de 2024."

    def test_day_count_override(self, renderer, contractor, trip) -> None:
        content = render_contract(renderer, contractor, trip, day_count=2)
        assert paragraphs(content, "schedule")[2] == "Total de diárias contratadas: 2."

    def test_negative_distance_matches_subtotal(self, renderer, contractor, trip) -> None:
        trip = trip.model_copy(update={"distance_km": Decimal("-100")})
        price = paragraphs(render_contract(renderer, contractor, trip), "price")
        assert price[2] == "b) Quilometragem (0 km): R$ 0,00;"


class TestBlankSlots:
    def test_itinerary_without_dates(self, renderer, contractor) -> None:
        trip = Trip(id=9, name="Sem datas")
        content = renderer.render(
            DocumentKind.CONTRACT,
            ContractInput(contractor=contractor, trip=trip, generated_on=date(2024, 3, 5)),
            breakdown=CostBreakdown.zero(),
            verbalized_total=verbalize(0),
        )
        assert paragraphs(content, "schedule") == (
            "Partida em ___/___/______, às ___:___.",
            "Retorno em ___/___/______, às ___:___.",
            "Total de diárias contratadas: ____________________.",
        )
        assert paragraphs(content, "object")[1] == "Roteiro: ____________________"
        assert "R$ 0,00 (zero reais)" in paragraphs(content, "price")[0]

    def test_contract_requires_breakdown(self, renderer, contractor, trip) -> None:
        data = ContractInput(contractor=contractor, trip=trip, generated_on=date(2024, 3, 5))
        with pytest.raises(ValueError):
            renderer.render(DocumentKind.CONTRACT, data, verbalized_total="zero reais")
        with pytest.raises(ValueError):
            renderer.render(DocumentKind.CONTRACT, data, breakdown=CostBreakdown.zero())


class TestFormatQuantity:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("200"), "200"),
            (Decimal("1200"), "1.200"),
            (Decimal("1200.00"), "1.200"),
            (Decimal("12.5"), "12,50"),
            (None, "0"),
        ],
    )
    def test_format(self, value, expected: str) -> None:
        assert format_quantity(value) == expected
