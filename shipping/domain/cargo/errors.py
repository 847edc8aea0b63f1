"""
Errors for the cargo shipping bounded context.

Every error raised across a service boundary is a ShippingError tagged
with an ErrorKind. Callers classify errors by their kind, never by
identity or subclass. No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of error categories known to the system."""

    UNKNOWN_CARGO = "unknown_cargo"
    UNKNOWN_LOCATION = "unknown_location"
    UNKNOWN_VOYAGE = "unknown_voyage"
    INVALID_ARGUMENT = "invalid_argument"
    BAD_ROUTE = "bad_route"
    MALFORMED_REQUEST = "malformed_request"
    INTERNAL = "internal"


class ShippingError(Exception):
    """Base error carrying a kind tag and a human-readable message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(self.message)


class UnknownCargoError(ShippingError):
    """Raised when no cargo exists for a tracking id."""

    def __init__(self, tracking_id: str = "") -> None:
        super().__init__(ErrorKind.UNKNOWN_CARGO, "unknown cargo")
        self.tracking_id = tracking_id


class UnknownLocationError(ShippingError):
    """Raised when a UN/LOCODE does not name a known location."""

    def __init__(self, locode: str = "") -> None:
        super().__init__(ErrorKind.UNKNOWN_LOCATION, "unknown location")
        self.locode = locode


class UnknownVoyageError(ShippingError):
    """Raised when a voyage number does not name a scheduled voyage."""

    def __init__(self, voyage_number: str = "") -> None:
        super().__init__(ErrorKind.UNKNOWN_VOYAGE, "unknown voyage")
        self.voyage_number = voyage_number


class InvalidArgumentError(ShippingError):
    """Raised when a service call receives missing or unusable input."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.INVALID_ARGUMENT, "invalid argument")


class InternalError(ShippingError):
    """Wraps a failure that is not part of the domain taxonomy."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.INTERNAL, message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalError":
        return cls(str(exc) or type(exc).__name__)
