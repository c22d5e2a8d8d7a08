"""Shared schema building blocks: request casing, partial updates, the envelope."""

from typing import Any, ClassVar, Generic, Self, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic.alias_generators import to_camel, to_snake

from src.fieldops.core.exceptions import ValidationFailed

T = TypeVar("T")


class RequestModel(BaseModel):
    """Request body accepting either snake_case or camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialUpdate(RequestModel):
    """Request body where absent keys mean "leave untouched".

    An explicit null is only accepted for fields listed in ``nullable_fields``
    and clears them; null for any other field fails validation.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self) -> Self:
        for name in self.model_fields_set - self.nullable_fields:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """The fields the client sent and their new values."""
        return {name: getattr(self, name) for name in self.model_fields_set}

    @classmethod
    def payload_fields(cls, payload: dict[str, Any]) -> set[str]:
        """Field names addressed by a raw payload, in either key casing.

        Keys that are not fields come back in snake_case.
        """
        by_alias = {field.alias or name: name for name, field in cls.model_fields.items()}
        return {by_alias.get(key, to_snake(key)) for key in payload}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Self:
        """Validate a raw payload, raising ValidationFailed with one entry per field."""
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            errors = [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            raise ValidationFailed(errors=errors) from e


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response."""

    success: bool = True
    data: T | None = None
    message: str | None = None


class DeletedRead(BaseModel):
    """Payload for deletions: only the id of the removed record."""

    id: UUID


def strip_or_none(v: str | None) -> str | None:
    """Trim optional free text, collapsing blank strings to None."""
    if v is None:
        return None
    v = v.strip()
    return v or None


def strip_required(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
    return v
