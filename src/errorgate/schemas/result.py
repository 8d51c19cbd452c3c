"""
Response shapes produced by the error handlers.

- StructuredResult: JSON body for API callers.
- ViewInstruction: what the browser path should do, either Redirect{url} or
  Render{view_name, model}. It is a tagged union on `kind`, so it can be validated
  or dumped with pydantic like any other schema.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from errorgate.core.status import Status, StatusDescriptor


class StructuredResult(BaseModel):
    """
    API response body.

    Serialized shape:
        {
            "status": {"code": 4006, "label": "Operation failed"},
            "data": null,
            "message": "user-facing message or empty string"
        }
    """

    model_config = ConfigDict(frozen=True)

    status: StatusDescriptor
    data: Any = None
    message: str = ""

    @classmethod
    def ok(cls, data: Any = None, message: str = "") -> "StructuredResult":
        return cls(status=Status.OK, data=data, message=message)

    @classmethod
    def fail(cls, status: StatusDescriptor = Status.FAIL_OPERATION, message: str = "",
             data: Any = None) -> "StructuredResult":
        return cls(status=status, data=data, message=message)

    @property
    def is_ok(self) -> bool:
        return self.status.code == Status.OK.code


class Redirect(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["redirect"] = "redirect"
    url: str


class Render(BaseModel):
    """Render `view_name` with `model` as the template context."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["render"] = "render"
    view_name: str
    model: dict[str, Any]


ViewInstruction = Annotated[Union[Redirect, Render], Field(discriminator="kind")]


__all__ = ["StructuredResult", "Redirect", "Render", "ViewInstruction"]
