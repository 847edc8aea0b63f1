"""
Error classification and encoding for FastAPI.

Every error reaching the client, whatever its origin, is encoded here as
``{"error": <message>}`` with a status chosen by the error's kind.
Classification is total: errors of unknown type map to 500.
"""

import logging
from typing import Callable, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shipping.domain.cargo.errors import ErrorKind, ShippingError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_405 = 405
HTTP_500 = 500

JSON_MEDIA_TYPE = "application/json; charset=utf-8"

_STATUS_BY_KIND = {
    ErrorKind.UNKNOWN_CARGO: HTTP_404,
    ErrorKind.INVALID_ARGUMENT: HTTP_400,
}

# Request translation failures. They fall through to 500 unless the
# application is configured to report them as client errors.
_REQUEST_KINDS = frozenset({ErrorKind.BAD_ROUTE, ErrorKind.MALFORMED_REQUEST})

ErrorEncoder = Callable[[BaseException], JSONResponse]


class ShippingJSONResponse(JSONResponse):
    """JSON response declaring its UTF-8 charset explicitly."""

    media_type = JSON_MEDIA_TYPE


def classify(error: BaseException, client_errors_as_bad_request: bool = False) -> int:
    """Return the HTTP status for an error.

    Args:
        error: Any exception.
        client_errors_as_bad_request: Map bad routes and malformed bodies
            to 400 instead of falling through to 500.

    Returns:
        The status code. Never raises.
    """
    if not isinstance(error, ShippingError):
        return HTTP_500
    if error.kind in _STATUS_BY_KIND:
        return _STATUS_BY_KIND[error.kind]
    if client_errors_as_bad_request and error.kind in _REQUEST_KINDS:
        return HTTP_400
    return HTTP_500


def error_message(error: BaseException) -> str:
    """Return the human-readable text of an error."""
    if isinstance(error, ShippingError):
        return error.message
    return str(error) or type(error).__name__


def error_response(
    status_code: int, message: str, headers: Optional[Mapping[str, str]] = None
) -> JSONResponse:
    """Build a JSON error envelope."""
    return ShippingJSONResponse(
        status_code=status_code, content={"error": message}, headers=headers
    )


def make_error_encoder(client_errors_as_bad_request: bool = False) -> ErrorEncoder:
    """Build the error encoder shared by every operation.

    Args:
        client_errors_as_bad_request: See classify().

    Returns:
        A function turning any exception into a JSON error response.
    """

    def encode_error(error: BaseException) -> JSONResponse:
        return error_response(
            classify(error, client_errors_as_bad_request), error_message(error)
        )

    return encode_error


def register_error_handlers(app: FastAPI, encode_error: ErrorEncoder) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        encode_error: The encoder built by make_error_encoder().
    """

    @app.exception_handler(ShippingError)
    async def handle_shipping_error(
        request: Request, exc: ShippingError
    ) -> JSONResponse:
        """Handle request translation failures raised before a service call."""
        logger.warning(
            "%s %s failed: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.kind.value,
        )
        return encode_error(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle unmatched routes and methods."""
        if exc.status_code == HTTP_404:
            logger.warning("No route for %s %s", request.method, request.url.path)
            return error_response(HTTP_404, "bad route")
        if exc.status_code == HTTP_405:
            return error_response(HTTP_405, "method not allowed", headers=exc.headers)
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for errors that are not part of the taxonomy."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return encode_error(exc)
