"""
Request payload validation.

Endpoints validate raw request data here instead of letting FastAPI parse
the body, so that a bad payload is reported as a 400 listing every
violation and nothing downstream runs.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.errors import BadRequestError, format_validation_errors

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_payload(schema: Type[SchemaT], data: Any) -> SchemaT:
    """
    Validate `data` against a pydantic schema.

    Returns:
        The validated schema instance

    Raises:
        BadRequestError: listing every violation message
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise BadRequestError(format_validation_errors(e.errors()))
