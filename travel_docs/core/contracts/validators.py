"""
JSON Schema Record Contracts

Validation of the raw rows the persistence layer hands to the core, before
they are turned into entity models. Uses jsonschema (Draft 2020-12).

Schemas (in schema/ next to this module):
- client_record.json     (clientes)
- trip_record.json       (viagens)
- air_group_record.json  (grupos_aereos)
- hotel_record.json      (hoteis, optionally joined with viagens / grupos_aereos)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for the bundled JSON Schema files.

    Schemas are read once and cached; the cache is the only shared state of
    the package and is never written after load.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> list[str]:
        """Names of the bundled schemas, sorted."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a schema by name.

        Args:
            schema_name: File name without extension (e.g. 'client_record')

        Returns:
            Parsed schema

        Raises:
            FileNotFoundError: If there is no such schema file
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Validates records against one bundled schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If the record does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """
        Every violation as "path: message", ordered by path.

        The root of the record is reported as "$".
        """
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))):
            path = ".".join(str(part) for part in error.absolute_path) or "$"
            messages.append(f"{path}: {error.message}")
        return messages


class ClientRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("client_record")


class TripRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("trip_record")


class AirGroupRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("air_group_record")


class HotelRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("hotel_record")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_client_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: If the row does not match client_record.json
    """
    ClientRecordValidator().validate(data)


def validate_trip_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: If the row does not match trip_record.json
    """
    TripRecordValidator().validate(data)


def validate_air_group_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: If the row does not match air_group_record.json
    """
    AirGroupRecordValidator().validate(data)


def validate_hotel_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: If the row does not match hotel_record.json
    """
    HotelRecordValidator().validate(data)
