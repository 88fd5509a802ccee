"""Library exceptions."""

from __future__ import annotations


class ParkingGridError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        self.detail = detail if detail is not None else message
        super().__init__(message if message is not None else self.detail)
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.user_message = user_message


class ConfigurationError(ParkingGridError):
    """Raised when a grid or layout definition is invalid."""

    error_type = "config"
    default_error_code = "config_error"


class InvalidBayIndex(ParkingGridError):
    """Raised when a bay index falls outside the grid."""

    error_type = "validation"
    default_error_code = "invalid_bay_index"


class InvalidVehicleTag(ParkingGridError):
    """Raised when a vehicle tag is reserved or not a single character."""

    error_type = "validation"
    default_error_code = "invalid_vehicle_tag"
