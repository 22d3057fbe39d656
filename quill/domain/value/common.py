"""Base classes for value objects."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


class WireModel(BaseModel):
    """Base class for models that leave the service as JSON.

    Field names stay snake_case in Python and are serialized as camelCase
    (``total_pages`` -> ``totalPages``). Either form is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class WireValueObject(WireModel):
    """Immutable wire model."""

    model_config = ConfigDict(frozen=True)
