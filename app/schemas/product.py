from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.services.outcomes import ValidationFailure


class ProductPayload(BaseModel):
    """
    Shape of a product body sent on create and update.

    Types are strict: "12" is not a price and 1 is not a boolean.
    Unknown fields are allowed and left untouched.
    """
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, strict=True, description="Product name")
    category: str = Field(..., min_length=1, strict=True, description="Product category")
    price: float = Field(..., strict=True, description="Product price (any number)")
    available: bool = Field(..., strict=True, description="Whether the product is available")


_MESSAGES = {
    "missing": "{field} is a required field",
    "string_type": "{field} must be a `string` type",
    "string_too_short": "{field} must not be empty",
    "float_type": "{field} must be a `number` type",
    "float_parsing": "{field} is out of range",
    "finite_number": "{field} is out of range",
    "bool_type": "{field} must be a `boolean` type",
    "model_type": "request body must be a JSON object",
    "model_attributes_type": "request body must be a JSON object",
}


def _error_type(error: dict) -> str:
    # Integers too large for a float fail as float_type, but they are numbers
    value = error.get("input")
    if (
        error["type"] == "float_type"
        and isinstance(value, int)
        and not isinstance(value, bool)
    ):
        return "finite_number"
    return error["type"]


def _render(error: dict) -> str:
    field = ".".join(str(part) for part in error["loc"]) or "body"
    template = _MESSAGES.get(_error_type(error))
    if template is None:
        return f"{field}: {error['msg']}"
    return template.format(field=field)


def validate_product(payload: Any) -> Optional[ValidationFailure]:
    """
    Validate a decoded JSON payload against the product shape.

    Every violation is collected, one message per offending field.

    Args:
        payload: Decoded request body of unknown shape

    Returns:
        None if the payload is valid, otherwise a ValidationFailure
    """
    try:
        ProductPayload.model_validate(payload)
    except ValidationError as e:
        return ValidationFailure(errors=[_render(error) for error in e.errors()])
    return None
