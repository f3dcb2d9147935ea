"""Reusable, strict base models for the Merkle funnel."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """A strict, immutable pydantic base model."""

    model_config = ConfigDict(
        validate_default=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
