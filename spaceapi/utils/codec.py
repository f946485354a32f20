"""
JSON encoding and decoding of status documents.

pydantic does the actual work, these helpers only fix the options every
caller needs (wire names, compact output) and turn pydantic's errors into
a ``DecodeError``.
"""

import logging
from pydantic import BaseModel, ValidationError
from typing import Any, Dict, Type, TypeVar

from spaceapi.models.base_model import WIRE_CONTEXT
from spaceapi.models.status_model import Status
from spaceapi.utils.errors import DecodeError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def encode(model: BaseModel) -> str:
    return model.model_dump_json(by_alias=True)


def to_dict(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def decode(text: str, model_cls: Type[ModelT] = Status) -> ModelT:
    try:
        return model_cls.model_validate_json(text, context=WIRE_CONTEXT)
    except ValidationError as e:
        logger.debug("Could not decode %s: %s", model_cls.__name__, e)
        raise DecodeError(_describe(model_cls, e), e.errors()) from e


def from_dict(data: Dict[str, Any], model_cls: Type[ModelT] = Status) -> ModelT:
    try:
        return model_cls.model_validate(data, context=WIRE_CONTEXT)
    except ValidationError as e:
        logger.debug("Could not decode %s: %s", model_cls.__name__, e)
        raise DecodeError(_describe(model_cls, e), e.errors()) from e


def _describe(model_cls: Type[BaseModel], error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"invalid {model_cls.__name__} at {location}: {first['msg']}"
