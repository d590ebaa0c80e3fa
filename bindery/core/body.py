"""Request bodies and the JSON serialization rules of API models.

A request either carries no body at all, an explicit zero-length body, or a
JSON document. The distinction between the first two matters for endpoints
that insist on ``Content-Length: 0``.
"""

import json
from dataclasses import dataclass, field
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)

__all__ = [
    'ApiModel',
    'EMPTY_BODY',
    'EmptyBody',
    'JsonBody',
    'NO_BODY',
    'NoBody',
    'RequestBody',
]


class ApiModel(BaseModel):
    """Base class for request and response models of the bindings.

    Unknown response fields are ignored. When serialized, fields that are
    ``None`` are left out unless they are listed in ``__nullable_fields__``
    and were explicitly set, in which case ``null`` is sent to clear the
    field on the server.
    """

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    __nullable_fields__: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode='wrap')
    def serialize_present_fields(
        self, handler: SerializerFunctionWrapHandler
    ) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        keep_null = set()
        for name in self.__nullable_fields__ & self.model_fields_set:
            info = type(self).model_fields[name]
            keep_null.add(name)
            if info.alias:
                keep_null.add(info.alias)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in keep_null
        }


@dataclass(frozen=True)
class NoBody:
    """The request is sent without a body."""

    def headers(self) -> dict[str, str]:
        return {}

    def content(self) -> bytes | None:
        return None


@dataclass(frozen=True)
class EmptyBody:
    """The request is sent with an explicit zero-length body."""

    def headers(self) -> dict[str, str]:
        return {'Content-Length': '0'}

    def content(self) -> bytes | None:
        return b''


@dataclass(frozen=True)
class JsonBody:
    """The request carries a JSON document."""

    payload: bytes
    content_type: str = field(default='application/json')

    @classmethod
    def from_model(cls, model: BaseModel) -> 'JsonBody':
        return cls(model.model_dump_json(by_alias=True).encode())

    @classmethod
    def from_data(cls, data: Any) -> 'JsonBody':
        if isinstance(data, BaseModel):
            return cls.from_model(data)
        return cls(json.dumps(data, separators=(',', ':')).encode())

    def headers(self) -> dict[str, str]:
        return {'Content-Type': self.content_type}

    def content(self) -> bytes | None:
        return self.payload


RequestBody = NoBody | EmptyBody | JsonBody

NO_BODY = NoBody()
EMPTY_BODY = EmptyBody()
