"""
Shared pydantic base for analysis models.

API payloads arrive in camelCase ("currentValue", "weightPercent") while the
Python side works in snake_case. Models accept either spelling and dump
camelCase with ``model_dump(by_alias=True)`` for the presentation layer.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Immutable model with camelCase aliases; inf and NaN are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )
