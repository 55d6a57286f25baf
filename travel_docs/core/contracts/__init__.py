"""
Record Contract Module

JSON Schema validation of the persistence rows handed to the core.
"""

from .validators import (
    AirGroupRecordValidator,
    ClientRecordValidator,
    ContractValidator,
    HotelRecordValidator,
    SchemaLoader,
    TripRecordValidator,
    validate_air_group_record,
    validate_client_record,
    validate_hotel_record,
    validate_trip_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ClientRecordValidator",
    "TripRecordValidator",
    "AirGroupRecordValidator",
    "HotelRecordValidator",
    # Functions
    "validate_client_record",
    "validate_trip_record",
    "validate_air_group_record",
    "validate_hotel_record",
]
