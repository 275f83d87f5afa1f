import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T", bound="BaseModel")


def normalize_key(key: str) -> str:
    """Fold a wire key so that `RunId`, `runId`, `run_id` and `RUN-ID` compare equal."""
    return key.replace("_", "").replace("-", "").lower()


@lru_cache(maxsize=None)
def _field_lookup(model_cls: type[PydanticBaseModel]) -> dict[str, str]:
    lookup: dict[str, str] = {}
    for field_name, field_info in model_cls.model_fields.items():
        lookup[normalize_key(field_name)] = field_name
        if field_info.alias:
            lookup[normalize_key(field_info.alias)] = field_name
    return lookup


class BaseModel(PydanticBaseModel):
    """
    Base for every wire model.

    Decoding matches property names case-insensitively and drops unknown
    properties, because backend payloads mix PascalCase and camelCase.
    Encoding uses camelCase aliases.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        if isinstance(data, str | bytes):
            data = json.loads(data)
        if not isinstance(data, dict):
            return data

        lookup = _field_lookup(cls)
        matched: dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            field_name = lookup.get(normalize_key(key))
            if field_name is None:
                continue
            # First occurrence wins when a payload repeats a key in two casings.
            matched.setdefault(field_name, value)
        return matched

    @classmethod
    def from_json(cls: type[T], json_str: str | None = None) -> T | None:
        if not json_str:
            return None
        return cls.model_validate_json(json_str)

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready camelCase payload without unset (None) properties."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
