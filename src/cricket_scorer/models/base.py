"""Base model class for match state objects."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StateModel(BaseModel):
    """Base class for all in-memory state models.

    Attributes are snake_case in Python and camelCase on the wire.
    Assignments are validated so counters can never go negative.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model instance to a camelCase dictionary."""
        return self.model_dump(mode="json", by_alias=True)
