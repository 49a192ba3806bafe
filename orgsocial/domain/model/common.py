"""Base models for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for immutable domain models."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


class EntityModel(BaseModel):
    """Base class for domain entities with exposed setters.

    Assignments are validated, so setters cannot put an entity into a state
    construction would reject.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )
