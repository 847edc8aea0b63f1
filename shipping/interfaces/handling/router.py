"""
Operation table for the handling API.
"""

from shipping.application.handling.register_incident import RegisterIncidentUseCase
from shipping.domain.cargo.ports import HandlingService
from shipping.interfaces.handling.decoders import decode_register_incident
from shipping.interfaces.handling.schemas import RegisterIncidentResponse
from shipping.interfaces.operations import Operation, make_response_encoder
from shipping.shared.errors.handlers import ErrorEncoder

PREFIX = "/handling/v1"


def handling_operations(
    handling_service: HandlingService, encode_error: ErrorEncoder
) -> tuple[Operation, ...]:
    """Build the handling operation table."""
    return (
        Operation(
            name="register_incident",
            method="POST",
            path=f"{PREFIX}/incidents",
            decode=decode_register_incident,
            invoke=RegisterIncidentUseCase(handling_service).execute,
            encode=make_response_encoder(
                lambda _result: RegisterIncidentResponse(), encode_error
            ),
        ),
    )
