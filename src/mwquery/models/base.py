from pydantic import BaseModel, ConfigDict


class MWModel(BaseModel):
    """Base for every API model; unknown fields are ignored, instances are immutable."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
