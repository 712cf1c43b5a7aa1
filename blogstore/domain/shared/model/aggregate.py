from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Mutable domain entity with identity. State changes go through methods."""

    model_config = ConfigDict(validate_assignment=False)
