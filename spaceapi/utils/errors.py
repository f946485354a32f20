from typing import Any, Dict, List, Optional


class SpaceApiError(Exception):
    """Base class for all errors raised by spaceapi."""


class StatusBuilderError(SpaceApiError, ValueError):
    """A status could not be built because it breaks a rule of its schema version."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SensorTemplateError(SpaceApiError, ValueError):
    """A sensor could not be created from a template and a raw value."""

    message = "sensor value cannot be parsed"

    def __init__(self, value: str):
        self.value = value
        super().__init__(self.message)


class BadInteger(SensorTemplateError):
    message = "sensor integer value cannot be parsed"


class BadFloat(SensorTemplateError):
    message = "sensor float value cannot be parsed"


class BadBool(SensorTemplateError):
    message = "sensor boolean value cannot be parsed"


class UnknownFieldError(SpaceApiError, ValueError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"unknown field `{field_name}`")


class DecodeError(SpaceApiError, ValueError):
    """Text could not be decoded into a record of the status document."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.errors = errors or []
        super().__init__(message)
