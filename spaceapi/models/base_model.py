from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    ValidationInfo,
    model_serializer,
    model_validator,
)
from typing import Any, ClassVar, Dict, FrozenSet, Tuple

from spaceapi.utils.errors import UnknownFieldError

# Validation context used when the input is a JSON document.
WIRE_CONTEXT = {"wire": True}


def from_wire(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get("wire"))


class SpaceApiModel(BaseModel):
    """
    Base for every record of the status document.

    Fields that are None are left out of the output, fields listed in
    ``skip_empty_fields`` are also left out when they are empty, and
    fields listed in ``nullable_fields`` are always written (as ``null``
    when unset). A field listed in ``flatten_fields`` holds a sub-record
    whose keys live directly in this record's JSON object.

    Python code may use field names (``type_``) and pass flattened
    sub-records as such, a JSON document only knows the wire keys.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()
    skip_empty_fields: ClassVar[FrozenSet[str]] = frozenset()
    flatten_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _nest_flattened(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        if from_wire(info):
            for name, field in cls.model_fields.items():
                renamed = field.alias is not None and field.alias != name
                if name in data and (renamed or name in cls.flatten_fields):
                    raise UnknownFieldError(name)
        if not cls.flatten_fields:
            return data
        data = dict(data)
        for name in cls.flatten_fields:
            if name in data:
                continue
            sub_model = cls.model_fields[name].annotation
            data[name] = {key: data.pop(key) for key in sub_model.model_fields if key in data}
        return data

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler, info: SerializationInfo) -> Dict[str, Any]:
        data = handler(self)
        result = {}
        for name, field in type(self).model_fields.items():
            key = field.alias if info.by_alias and field.alias else name
            if key not in data:
                continue
            value = data[key]
            if name in self.flatten_fields:
                result.update(value)
            elif name in self.nullable_fields:
                result[key] = value
            elif value is None:
                continue
            elif name in self.skip_empty_fields and not value:
                continue
            else:
                result[key] = value
        return self._encode_extra(result)

    def _encode_extra(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data
