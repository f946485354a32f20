from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing import Any, Dict

from spaceapi.utils.errors import UnknownFieldError

EXTENSION_PREFIX = "ext_"


class Extensions(dict):
    """
    Custom ``ext_`` fields of a status document.

    Entries are stored without the prefix, so ``set("foo", ...)`` and
    ``set("ext_foo", ...)`` address the same entry. Only one prefix is
    removed: ``set("ext_ext_foo", ...)`` stores ``ext_foo``.
    """

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Any]) -> "Extensions":
        extensions = cls()
        for name, value in mapping.items():
            extensions.set(name, value)
        return extensions

    def set(self, name: str, value: Any) -> None:
        self[strip_prefix(name)] = value

    def encode(self) -> Dict[str, Any]:
        return {EXTENSION_PREFIX + name: value for name, value in self.items()}

    def decode(self, field_name: str, value: Any) -> None:
        if not field_name.startswith(EXTENSION_PREFIX):
            raise UnknownFieldError(field_name)
        self[field_name[len(EXTENSION_PREFIX):]] = value

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler):
        # Validated maps already hold bare names, they are frozen as they are.
        return core_schema.no_info_after_validator_function(
            FrozenExtensions,
            handler.generate_schema(Dict[str, Any]),
        )


class FrozenExtensions(Extensions):
    """The extensions of a ``Status``. Any attempt to change them raises TypeError."""

    def _read_only(self, *args, **kwargs):
        raise TypeError("extensions of a status are read-only")

    __setitem__ = __delitem__ = __ior__ = _read_only
    set = decode = update = setdefault = pop = popitem = clear = _read_only

    def __reduce__(self):
        return type(self), (dict(self),)


def strip_prefix(name: str) -> str:
    if name.startswith(EXTENSION_PREFIX):
        return name[len(EXTENSION_PREFIX):]
    return name
