"""
Sensor templates.

A template describes a sensor without its reading. Given the raw string of
a reading (as polled from hardware by the caller) it creates the typed
sensor record and registers it in a ``Sensors`` container.
"""

import logging
import re
from abc import ABC, abstractmethod
from pydantic import BaseModel, ConfigDict, Field
from typing import ClassVar, List, Optional

from spaceapi.models.sensor_model import (
    AccountBalanceSensor,
    BarometerSensor,
    BeverageSupplySensor,
    DoorLockedSensor,
    HumiditySensor,
    NetworkConnectionKind,
    NetworkConnectionsSensor,
    PeopleNowPresentSensor,
    PowerConsumptionSensor,
    SensorMetadata,
    SensorMetadataWithLocation,
    SensorModel,
    Sensors,
    TemperatureSensor,
    TotalMemberCountSensor,
)
from spaceapi.utils.errors import BadBool, BadFloat, BadInteger, SensorTemplateError

logger = logging.getLogger(__name__)

_U64_MAX = 2 ** 64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(inf|infinity|nan|([0-9]+\.?[0-9]*|\.[0-9]+)(e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def parse_unsigned(value: str) -> int:
    if not _UNSIGNED.fullmatch(value) or int(value) > _U64_MAX:
        raise BadInteger(value)
    return int(value)


def parse_float(value: str) -> float:
    if not _FLOAT.fullmatch(value):
        raise BadFloat(value)
    return float(value)


def parse_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise BadBool(value)


class SensorTemplate(BaseModel, ABC):
    """Base class of all sensor templates."""

    model_config = ConfigDict(frozen=True)

    # Name of the Sensors list the created records are appended to.
    collection: ClassVar[str] = ""

    @abstractmethod
    def attempt_convert(self, value: str) -> SensorModel:
        """Parse ``value`` and create the sensor record, raising a ``SensorTemplateError`` if it is malformed."""

    def try_to_sensor(self, value: str, sensors: Sensors) -> None:
        getattr(sensors, self.collection).append(self.attempt_convert(value))

    def to_sensor(self, value: str, sensors: Sensors) -> None:
        """Like ``try_to_sensor``, but a bad reading is logged and left out."""
        try:
            self.try_to_sensor(value, sensors)
        except SensorTemplateError as e:
            logger.warning("Omitting sensor. Reason: %s", e)


class TemperatureSensorTemplate(SensorTemplate):
    metadata: SensorMetadataWithLocation
    unit: str

    collection = "temperature"

    def attempt_convert(self, value: str) -> TemperatureSensor:
        return TemperatureSensor(metadata=self.metadata, unit=self.unit, value=parse_float(value))


class DoorLockedSensorTemplate(SensorTemplate):
    metadata: SensorMetadataWithLocation

    collection = "door_locked"

    def attempt_convert(self, value: str) -> DoorLockedSensor:
        return DoorLockedSensor(metadata=self.metadata, value=parse_bool(value))


class BarometerSensorTemplate(SensorTemplate):
    metadata: SensorMetadataWithLocation
    unit: str

    collection = "barometer"

    def attempt_convert(self, value: str) -> BarometerSensor:
        return BarometerSensor(metadata=self.metadata, unit=self.unit, value=parse_float(value))


class HumiditySensorTemplate(SensorTemplate):
    metadata: SensorMetadataWithLocation
    unit: str

    collection = "humidity"

    def attempt_convert(self, value: str) -> HumiditySensor:
        return HumiditySensor(metadata=self.metadata, unit=self.unit, value=parse_float(value))


class PowerConsumptionSensorTemplate(SensorTemplate):
    metadata: SensorMetadataWithLocation
    unit: str

    collection = "power_consumption"

    def attempt_convert(self, value: str) -> PowerConsumptionSensor:
        return PowerConsumptionSensor(
            metadata=self.metadata, unit=self.unit, value=parse_float(value)
        )


class BeverageSupplySensorTemplate(SensorTemplate):
    metadata: SensorMetadata
    unit: str

    collection = "beverage_supply"

    def attempt_convert(self, value: str) -> BeverageSupplySensor:
        return BeverageSupplySensor(
            metadata=self.metadata, unit=self.unit, value=parse_unsigned(value)
        )


class AccountBalanceSensorTemplate(SensorTemplate):
    metadata: SensorMetadata
    unit: str

    collection = "account_balance"

    def attempt_convert(self, value: str) -> AccountBalanceSensor:
        return AccountBalanceSensor(metadata=self.metadata, unit=self.unit, value=parse_float(value))


class TotalMemberCountSensorTemplate(SensorTemplate):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)

    collection = "total_member_count"

    def attempt_convert(self, value: str) -> TotalMemberCountSensor:
        return TotalMemberCountSensor(metadata=self.metadata, value=parse_unsigned(value))


class PeopleNowPresentSensorTemplate(SensorTemplate):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    names: Optional[List[str]] = None

    collection = "people_now_present"

    def attempt_convert(self, value: str) -> PeopleNowPresentSensor:
        return PeopleNowPresentSensor(
            metadata=self.metadata, names=self.names, value=parse_unsigned(value)
        )


class NetworkConnectionsSensorTemplate(SensorTemplate):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    kind: Optional[NetworkConnectionKind] = None

    collection = "network_connections"

    def attempt_convert(self, value: str) -> NetworkConnectionsSensor:
        return NetworkConnectionsSensor(
            metadata=self.metadata, kind=self.kind, value=parse_unsigned(value)
        )
