"""
Unit tests for the passenger manifest

Checks:
1. Rows in the supplied order, one per passenger
2. Responsible passenger highlighted and marked "(Resp.)"
3. Ages computed against the explicit "today"
4. Header for trips and air groups; optional itinerary and responsible blocks
"""

from datetime import date

import pytest

from travel_docs.core.domain import (
    AirGroup,
    Client,
    DocumentKind,
    FieldSection,
    TableSection,
    Trip,
)
from travel_docs.documents import DocumentRenderer, ManifestInput, sort_passengers

TODAY = date(2024, 3, 15)


@pytest.fixture
def passengers() -> tuple[Client, ...]:
    return (
        Client(id=2, given_name="Bruno", family_name="Lima", birth_date=date(2000, 3, 16), rg="55"),
        Client(id=7, given_name="Ana", family_name="Souza", tax_id="52998224725", birth_date=date(2023, 3, 15)),
        Client(id="3", given_name="Carla"),
    )


@pytest.fixture
def trip() -> Trip:
    return Trip(
        id=1,
        name="Foz",
        origin="Curitiba",
        destination="Foz do Iguaçu",
        departure_date=date(2024, 1, 10),
        departure_time="06:00",
        itinerary="Cataratas",
        contractor_id=7,
    )


def render(plan, passengers, contractor_id=None):
    return DocumentRenderer().render(
        DocumentKind.PASSENGER_MANIFEST,
        ManifestInput(plan=plan, passengers=passengers, today=TODAY, contractor_id=contractor_id),
    )


def table(content) -> TableSection:
    section = content.section("passengers")
    assert isinstance(section, TableSection)
    return section


class TestManifestTable:
    def test_columns(self, trip, passengers) -> None:
        assert table(render(trip, passengers)).columns == (
            "#", "Nome Completo", "CPF", "RG", "Nascimento", "Idade", "Celular"
        )

    def test_supplied_order(self, trip, passengers) -> None:
        rows = table(render(trip, passengers)).rows
        assert [row.cells[0] for row in rows] == ["1", "2", "3"]
        assert [row.cells[1] for row in rows] == ["Bruno Lima", "Ana Souza (Resp.)", "Carla"]

    def test_responsible_highlighted(self, trip, passengers) -> None:
        rows = table(render(trip, passengers)).rows
        assert [row.highlighted for row in rows] == [False, True, False]

    def test_ages(self, trip, passengers) -> None:
        rows = table(render(trip, passengers)).rows
        assert [row.cells[5] for row in rows] == ["23", "1", "-"]

    def test_identity_cells(self, trip, passengers) -> None:
        bruno, ana, carla = table(render(trip, passengers)).rows
        assert ana.cells[2] == "529.982.247-25"
        assert bruno.cells[3] == "55"
        assert bruno.cells[4] == "16/03/2000"
        assert carla.cells[2:] == ("-", "-", "-", "-", "-")

    def test_contractor_id_type_mismatch(self, trip, passengers) -> None:
        """An id stored as text still matches the numeric passenger id."""
        rows = table(render(trip, passengers, contractor_id="2")).rows
        assert rows[0].highlighted
        assert not rows[1].highlighted

    def test_empty_manifest(self, trip) -> None:
        assert table(render(trip, ())).rows == ()


class TestManifestHeader:
    def test_title_and_header(self, trip, passengers) -> None:
        content = render(trip, passengers)
        assert content.title == "Lista de Passageiros - Foz"
        header = content.section("header")
        assert isinstance(header, FieldSection)
        assert header.value_of("Viagem") == "Foz"
        assert header.value_of("Total Passageiros") == "3"
        assert header.value_of("Data/Hora Partida") == "10/01/2024 06:00"
        assert header.value_of("Data/Hora Retorno") == "- -"

    def test_responsible_block(self, trip, passengers) -> None:
        section = render(trip, passengers).section("responsible")
        assert section.value_of("Contratante Responsável") == "Ana Souza"

    def test_responsible_not_among_passengers(self, trip) -> None:
        section = render(trip, (Client(id=1, given_name="Zé"),)).section("responsible")
        assert section.value_of("Contratante Responsável") == "-"

    def test_no_contractor(self, passengers) -> None:
        plan = Trip(id=1, name="Livre")
        content = render(plan, passengers)
        assert "responsible" not in content.section_keys
        assert not any(row.highlighted for row in table(content).rows)

    def test_itinerary_only_when_filled(self, trip, passengers) -> None:
        assert render(trip, passengers).section("itinerary").paragraphs == ("Cataratas",)
        assert "itinerary" not in render(Trip(id=1), passengers).section_keys

    def test_air_group_header(self, passengers) -> None:
        group = AirGroup(id=4, name="Lisboa 2024", origin="GRU", destination="LIS")
        header = render(group, passengers).section("header")
        assert header.heading == "Grupo"
        assert header.value_of("Grupo") == "Lisboa 2024"

    def test_air_group_from_mapping(self) -> None:
        content = DocumentRenderer().render(
            DocumentKind.PASSENGER_MANIFEST,
            {
                "plan": {"id": 1, "nome_grupo": "Lisboa 2024", "origem": "GRU"},
                "passengers": [],
                "today": "2024-05-01",
            },
        )
        header = content.section("header")
        assert content.title == "Lista de Passageiros - Lisboa 2024"
        assert header.heading == "Grupo"
        assert header.value_of("Grupo") == "Lisboa 2024"
        assert header.value_of("Cidade de Origem") == "GRU"

    def test_trip_from_mapping(self) -> None:
        content = DocumentRenderer().render(
            DocumentKind.PASSENGER_MANIFEST,
            {
                "plan": {"id": 2, "nome_viagem": "Foz", "contratante_id": 5},
                "passengers": [{"id": 5, "nome": "Ana"}],
                "today": "2024-05-01",
            },
        )
        header = content.section("header")
        assert content.title == "Lista de Passageiros - Foz"
        assert header.heading == "Viagem"
        assert header.value_of("Viagem") == "Foz"
        assert table(content).rows[0].cells[1] == "Ana (Resp.)"


class TestSortPassengers:
    def test_case_insensitive_given_then_family(self) -> None:
        clients = [
            Client(id=1, given_name="bruno"),
            Client(id=2, given_name="Ana", family_name="Zeta"),
            Client(id=3, given_name="ana", family_name="Alves"),
        ]
        assert [c.id for c in sort_passengers(clients)] == [3, 2, 1]
