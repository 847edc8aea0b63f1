"""
Errors raised while translating a wire request into a command.

They share the ShippingError taxonomy so the error encoder classifies
them like any other error, by kind.
"""

from shipping.domain.cargo.errors import ErrorKind, ShippingError


class BadRouteError(ShippingError):
    """Raised when a route's required path identifier is missing."""

    def __init__(self) -> None:
        super().__init__(ErrorKind.BAD_ROUTE, "bad route")


class MalformedRequestError(ShippingError):
    """Raised when a request body is not the JSON document an operation expects."""

    def __init__(self, detail: str) -> None:
        super().__init__(ErrorKind.MALFORMED_REQUEST, detail)
