from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class BaseSchema(BaseModel):
    """Response schema serialized with the camelCase keys the dashboard binds to."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
