"""Pydantic models for the todo service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Task(BaseModel):
    """A task/todo item.

    Values are immutable; replacing a task in the store means storing a new
    ``Task`` in its slot.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX, description="Caller-supplied task id")
    text: StrictStr = Field(description="Task text")
    completed: StrictBool = Field(description="Completion flag")


class ListOptions(BaseModel):
    """Pagination options for listing tasks.

    Decoding is lenient: a missing, unparsable or negative field falls back to
    its default without affecting the other field.
    """

    model_config = ConfigDict(extra="ignore")

    offset: Optional[int] = Field(default=None, ge=0, description="Leading tasks to skip")
    limit: Optional[int] = Field(default=None, ge=0, description="Maximum tasks to return")

    @field_validator("offset", "limit", mode="wrap")
    @classmethod
    def _fallback_to_default(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def effective_offset(self) -> int:
        return self.offset if self.offset is not None else 0

    @classmethod
    def from_request(cls, query: Mapping[str, str], body: bytes = b"") -> ListOptions:
        """Merge query parameters with an optional JSON object body.

        Body fields win over query fields of the same name. A body that is not
        a JSON object is ignored.
        """
        data: dict[str, Any] = dict(query)
        if body:
            try:
                parsed = json.loads(body)
            except (ValueError, RecursionError):
                parsed = None
            if isinstance(parsed, dict):
                data.update(parsed)
        return cls.model_validate(data)
