"""
Operation table and request dispatch.

An Operation bundles what the HTTP layer needs to serve one route:
a decoder turning path parameters and body bytes into a command, an
invoker running the use case, and an encoder turning the result envelope
into a response. Tables are built once by the composition root and never
mutated; mount_operations() registers them on a FastAPI router, which
does the method and path matching.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from fastapi import APIRouter, Request
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool
from starlette.responses import Response

from shipping.shared.errors.handlers import ErrorEncoder, ShippingJSONResponse

Decoder = Callable[[Mapping[str, str], bytes], Any]
Invoker = Callable[[Any], Any]
Encoder = Callable[[Any], Response]


@dataclass(frozen=True)
class Operation:
    """Descriptor for one HTTP operation.

    Attributes:
        name: Route name, unique within the application.
        method: HTTP method.
        path: Path pattern with at most one ``{id}`` placeholder.
        decode: Builds the command; raises ShippingError on bad input.
        invoke: Runs the use case and returns its result envelope.
        encode: Turns the result envelope into a response.
    """

    name: str
    method: str
    path: str
    decode: Decoder
    invoke: Invoker
    encode: Encoder


def make_response_encoder(
    to_schema: Callable[[Any], BaseModel], encode_error: ErrorEncoder
) -> Encoder:
    """Build the encoder for one operation.

    An envelope carrying an error is handed to the error encoder and
    nothing else is written. Otherwise the envelope is mapped to its
    response schema and written with status 200.
    """

    def encode(envelope: Any) -> Response:
        if envelope.err is not None:
            return encode_error(envelope.err)
        body = to_schema(envelope)
        return ShippingJSONResponse(content=body.model_dump(mode="json", by_alias=True))

    return encode


def _make_endpoint(operation: Operation) -> Callable[[Request], Any]:
    async def endpoint(request: Request) -> Response:
        body = await request.body()
        command = operation.decode(request.path_params, body)
        envelope = await run_in_threadpool(operation.invoke, command)
        return operation.encode(envelope)

    endpoint.__name__ = operation.name
    return endpoint


def mount_operations(router: APIRouter, operations: Iterable[Operation]) -> None:
    """Register every operation of a table on a router."""
    for operation in operations:
        router.add_api_route(
            operation.path,
            _make_endpoint(operation),
            methods=[operation.method],
            name=operation.name,
            response_class=ShippingJSONResponse,
        )
