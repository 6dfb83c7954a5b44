"""Reusable, strict base models for configuration objects."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Unknown fields are rejected, values are not coerced across types, and
    instances cannot be mutated once built. Defaults are validated too, so a
    bad module-level constant fails at import time rather than at bind time.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )
