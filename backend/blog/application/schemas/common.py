"""Shared DTO base and the ``{success, err, data}`` envelope."""

from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case attributes as camelCase and accepts either on input."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}


class OperationResult(BaseModel):
    """Envelope returned by single-item operations."""

    success: bool = True
    err: str = ""
    data: Any = None

    @classmethod
    def ok(cls, data: Any = None) -> "OperationResult":
        """Success envelope; DTOs in ``data`` are dumped with their camelCase aliases."""
        if isinstance(data, BaseModel):
            data = data.model_dump(by_alias=True)
        elif isinstance(data, list):
            data = [d.model_dump(by_alias=True) if isinstance(d, BaseModel) else d for d in data]
        return cls(success=True, err="", data=data)

    @classmethod
    def fail(cls, err: str) -> "OperationResult":
        return cls(success=False, err=err, data=None)
