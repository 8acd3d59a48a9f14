from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Mutable domain object persisted as a unit; assignments are re-validated."""

    model_config = ConfigDict(validate_assignment=True)
