"""
Helpers shared by the command decoders.

Decoders check structure only: that the path identifier is present and
that the body is the JSON document the operation expects. Values are
never checked for meaning here.
"""

from typing import Annotated, Any, Mapping, TypeVar

from pydantic import BaseModel, BeforeValidator, ValidationError

from shipping.domain.cargo.entities import TrackingID
from shipping.shared.errors.transport import BadRouteError, MalformedRequestError

ID_PARAM = "id"

BodyT = TypeVar("BodyT", bound=BaseModel)
ItemT = TypeVar("ItemT")

NULL_DOCUMENT = b"null"


def _null_as_empty_string(value: Any) -> Any:
    return "" if value is None else value


def _null_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


# JSON null reads as the zero value, like an absent field.
NullableStr = Annotated[str, BeforeValidator(_null_as_empty_string)]
NullableList = Annotated[list[ItemT], BeforeValidator(_null_as_empty_list)]


def tracking_id_from_path(path_params: Mapping[str, str]) -> TrackingID:
    """Return the ``{id}`` path parameter.

    Raises:
        BadRouteError: If the parameter is absent or empty.
    """
    value = path_params.get(ID_PARAM)
    if not value:
        raise BadRouteError()
    return TrackingID(value)


def parse_body(schema: type[BodyT], body: bytes) -> BodyT:
    """Parse a JSON request body into a schema.

    Raises:
        MalformedRequestError: If the body is not valid JSON, not an
            object, or has a field of the wrong type. A ``null`` document
            reads as an empty object. Content after the first JSON value
            is rejected.
    """
    if body.strip() == NULL_DOCUMENT:
        body = b"{}"
    try:
        return schema.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedRequestError(_first_error(exc)) from exc


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]
