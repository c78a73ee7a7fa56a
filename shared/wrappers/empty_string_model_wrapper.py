import re
from typing import Any, ClassVar, Tuple
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

INVISIBLE_CHARS_PATTERN = re.compile(
    r"[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]")


def deep_clean(value: Any):
    """Recursively strip strings, drop invisible chars and turn blank strings into None."""

    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    return value


class EmptyStringModel(BaseModel):
    """Base for every request/response body.

    Fields are snake_case in Python and camelCase on the wire. Either
    spelling is accepted on input, and ORM objects validate directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return deep_clean(values)
        return values


class PartialUpdateModel(EmptyStringModel):
    """Body of a PUT: every field optional, but NOT NULL columns may not be
    cleared. A blank string counts as null after cleaning."""

    non_nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_cleared_required_fields(self):
        cleared = [
            name for name in self.non_nullable_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self
