from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResponseObject(dict):
    """
    Dict whose keys can also be read as attributes.

        campaign = ResponseObject.wrap({"id": "c1", "venues": [{"id": "v1"}]})
        campaign.id == campaign["id"] == "c1"
        campaign.venues[0].id == "v1"

    Payload fields win over dict methods of the same name, so the API's
    `{"count": 1, "items": [...]}` lists read as `result.items[0]`. Use
    `dict.items(obj)` or `obj.to_dict()` when the method itself is needed.

    Nested mappings and lists are wrapped recursively when the object is built.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        for key, value in dict.items(self):
            dict.__setitem__(self, key, wrap(value))

    @classmethod
    def wrap(cls, value: Any) -> Any:
        return wrap(value)

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("_") and dict.__contains__(self, name):
            return dict.__getitem__(self, name)
        return super().__getattribute__(name)

    def __getattr__(self, name: str) -> Any:
        raise AttributeError(f"'{type(self).__name__}' has no field '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __setitem__(self, key: str, value: Any) -> None:
        dict.__setitem__(self, key, wrap(value))

    def __delattr__(self, name: str) -> None:
        try:
            dict.__delitem__(self, name)
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self):
        return list(super().__dir__()) + [k for k in dict.keys(self) if isinstance(k, str)]

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict/list copy, e.g. for json.dumps."""
        return {key: to_plain(value) for key, value in dict.items(self)}


def wrap(value: Any) -> Any:
    if isinstance(value, ResponseObject):
        return value
    if isinstance(value, dict):
        return ResponseObject(value)
    if isinstance(value, list):
        return [wrap(item) for item in value]
    return value


def to_plain(value: Any) -> Any:
    """Undo `wrap`: plain dicts and lists all the way down."""
    if isinstance(value, ResponseObject):
        return value.to_dict()
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


def pluck(result: Any, name: str) -> Any:
    """Field `name` of a response payload, or None when the API left it out."""
    if isinstance(result, dict):
        return dict.get(result, name)
    return None


class ErrorMeta(BaseModel):
    """The `meta` block of an error body, e.g. {"code": 400, "errorType": "param_error", "errorDetail": "..."}."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    code: Optional[int] = Field(None, description="HTTP-like status code echoed by the API")
    error_type: Optional[str] = Field(None, alias="errorType")
    error_detail: Optional[str] = Field(None, alias="errorDetail")

    @field_validator("code", mode="before")
    @classmethod
    def validate_code(cls, v):
        if v is None:
            return None
        try:
            return int(v)
        except (ValueError, TypeError):
            return None

    @field_validator("error_type", "error_detail", mode="before")
    @classmethod
    def validate_text(cls, v):
        if v is None or isinstance(v, str):
            return v
        try:
            return json.dumps(v, ensure_ascii=False, sort_keys=True)
        except (TypeError, ValueError):
            return str(v)


class Envelope(BaseModel):
    """Outer JSON structure every response is wrapped in."""

    model_config = ConfigDict(extra="allow")

    meta: Dict[str, Any] = Field(default_factory=dict)
    response: Any = Field(..., description="Payload of a successful call")
    notifications: List[Any] = Field(default_factory=list)

    @field_validator("meta", mode="before")
    @classmethod
    def validate_meta(cls, v):
        return v if isinstance(v, dict) else {}

    @field_validator("notifications", mode="before")
    @classmethod
    def validate_notifications(cls, v):
        return v if isinstance(v, list) else []
