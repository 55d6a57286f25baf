"""
Unit tests for the entity models built from persistence rows

Checks:
1. Column names and camelCase aliases are accepted
2. Normalization of NULLs, dates, times and amounts
3. Immutability (frozen=True)
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from travel_docs.core.amounts import ZERO
from travel_docs.core.domain import AirGroup, Client, Hotel, Trip


class TestClient:
    @pytest.fixture
    def row(self) -> dict:
        return {
            "id": 7,
            "nome": "Ana",
            "sobrenome": "Souza",
            "cpf": "529.982.247-25",
            "rg": "12.345.678-9",
            "uf_rg": "PR",
            "data_nascimento": "1990-03-15",
            "celular": None,
            "email": "ana@example.com",
            "passaporte": None,
        }

    def test_from_row(self, row: dict) -> None:
        client = Client.model_validate(row)
        assert client.id == 7
        assert client.given_name == "Ana"
        assert client.family_name == "Souza"
        assert client.tax_id == "529.982.247-25"
        assert client.rg_state == "PR"
        assert client.birth_date == date(1990, 3, 15)
        assert client.phone == ""
        assert client.passport == ""

    def test_camel_case_aliases(self) -> None:
        client = Client.model_validate(
            {"id": 1, "nome": "Rui", "dataNascimento": "15/03/1990", "ufRg": "SP"}
        )
        assert client.birth_date == date(1990, 3, 15)
        assert client.rg_state == "SP"

    def test_field_names(self) -> None:
        client = Client(id=1, given_name="Rui", family_name="Lima", birth_date=date(1990, 1, 1))
        assert client.full_name == "Rui Lima"

    def test_full_name_without_family_name(self) -> None:
        assert Client(id=1, given_name=" Rui ").full_name == "Rui"

    def test_unparseable_birth_date_is_none(self) -> None:
        assert Client(id=1, given_name="Rui", birth_date="ontem").birth_date is None

    def test_given_name_required(self) -> None:
        with pytest.raises(ValidationError):
            Client.model_validate({"id": 1})

    def test_frozen(self, row: dict) -> None:
        client = Client.model_validate(row)
        with pytest.raises(ValidationError):
            client.given_name = "Outra"  # type: ignore[misc]


class TestTravelPlans:
    def test_trip_from_row(self) -> None:
        trip = Trip.model_validate(
            {
                "id": 3,
                "nome_viagem": "Gramado",
                "origem": "Curitiba",
                "destino": "Gramado",
                "data_ida": "2024-07-01",
                "hora_ida": "06:30:00",
                "data_volta": None,
                "hora_volta": "",
                "roteiro": None,
                "contratante_id": "",
                "km_total": "1.200,5",
                "dias_total": "4",
                "valor_diaria": 650,
                "valor_km": None,
                "valor_diaria_guia": "abc",
            }
        )
        assert trip.name == "Gramado"
        assert trip.departure_time == "06:30"
        assert trip.return_date is None
        assert trip.return_time is None
        assert trip.itinerary == ""
        assert trip.contractor_id is None
        assert trip.distance_km == Decimal("1200.5")
        assert trip.day_count == 4
        assert trip.daily_rate == Decimal("650")
        assert trip.per_km_rate is None
        assert trip.guide_daily_rate is None

    def test_air_group_from_row(self) -> None:
        group = AirGroup.model_validate(
            {"id": 9, "nome_grupo": "Lisboa 2024", "contratante_id": 7, "data_ida": "10/05/2024"}
        )
        assert group.name == "Lisboa 2024"
        assert group.contractor_id == 7
        assert group.departure_date == date(2024, 5, 10)


class TestHotel:
    def test_linked_to_trip(self) -> None:
        hotel = Hotel.model_validate(
            {
                "id": 1,
                "nome_hotel": "Hotel Central",
                "pais": "Portugal",
                "check_in": "2024-05-10",
                "check_out": "2024-05-15",
                "valor_total_brl": "1.500,00",
                "valor_total_eur": 250,
                "viagens": {"nome_viagem": "Europa"},
            }
        )
        assert hotel.trip_name == "Europa"
        assert hotel.link_label == "Viagem: Europa"
        assert hotel.total_brl == Decimal("1500.00")
        assert hotel.total_eur == Decimal("250")

    def test_linked_to_group(self) -> None:
        hotel = Hotel.model_validate(
            {"nome_hotel": "H", "pais": "Itália", "grupos_aereos": {"nome_grupo": "Roma"}}
        )
        assert hotel.link_label == "Grupo: Roma"

    def test_unlinked(self) -> None:
        hotel = Hotel.model_validate({"nome_hotel": "H", "pais": "Chile", "valor_total_brl": None})
        assert hotel.link_label == "-"
        assert hotel.total_brl == ZERO
