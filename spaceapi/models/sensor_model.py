from enum import Enum
from pydantic import ConfigDict, Field, NonNegativeInt
from typing import ClassVar, FrozenSet, List, Optional, Tuple

from spaceapi.models.base_model import SpaceApiModel


class SensorMetadata(SpaceApiModel):
    name: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None


class SensorMetadataWithLocation(SpaceApiModel):
    name: Optional[str] = None
    location: str
    description: Optional[str] = None


class SensorModel(SpaceApiModel):
    """A sensor reading. The keys of ``metadata`` are written next to the reading's own keys."""

    flatten_fields: ClassVar[Tuple[str, ...]] = ("metadata",)


class TemperatureSensor(SensorModel):
    metadata: SensorMetadataWithLocation
    unit: str
    value: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "location": "Main Room",
                "description": "Centre of main room on ground floor",
                "unit": "°C",
                "value": 24.1,
            }
        }
    )


class DoorLockedSensor(SensorModel):
    metadata: SensorMetadataWithLocation
    value: bool


class BarometerSensor(SensorModel):
    metadata: SensorMetadataWithLocation
    unit: str
    value: float


class HumiditySensor(SensorModel):
    metadata: SensorMetadataWithLocation
    unit: str
    value: float


class PowerConsumptionSensor(SensorModel):
    metadata: SensorMetadataWithLocation
    unit: str
    value: float


class BeverageSupplySensor(SensorModel):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    unit: str
    value: NonNegativeInt


class AccountBalanceSensor(SensorModel):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    unit: str
    value: float


class TotalMemberCountSensor(SensorModel):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    value: NonNegativeInt


class PeopleNowPresentSensor(SensorModel):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    names: Optional[List[str]] = None
    value: NonNegativeInt


class WindSensorMeasurement(SpaceApiModel):
    unit: str
    value: float


class WindSensorProperties(SpaceApiModel):
    speed: WindSensorMeasurement
    gust: WindSensorMeasurement
    direction: WindSensorMeasurement
    elevation: WindSensorMeasurement


class WindSensor(SensorModel):
    metadata: SensorMetadataWithLocation
    properties: WindSensorProperties


class NetworkConnectionKind(str, Enum):
    WIFI = "wifi"
    CABLE = "cable"
    SPACENET = "spacenet"


class NetworkConnectionMachine(SpaceApiModel):
    name: Optional[str] = None
    mac: str


class NetworkConnectionsSensor(SensorModel):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    machines: Optional[List[NetworkConnectionMachine]] = None
    kind: Optional[NetworkConnectionKind] = Field(default=None, alias="type")
    value: NonNegativeInt


class NetworkTrafficBitsPerSecond(SpaceApiModel):
    value: float
    maximum: Optional[float] = None


class NetworkTrafficPacketsPerSecond(SpaceApiModel):
    value: float


class NetworkTrafficSensorProperties(SpaceApiModel):
    bits_per_second: Optional[NetworkTrafficBitsPerSecond] = None
    packets_per_second: Optional[NetworkTrafficPacketsPerSecond] = None


class NetworkTrafficSensor(SensorModel):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    properties: NetworkTrafficSensorProperties


class RadiationSensorUnit(str, Enum):
    COUNTS_PER_MINUTE = "cpm"
    RADS_PER_HOUR = "r/h"
    MICRO_SIEVERTS_PER_HOUR = "µSv/h"
    MICRO_SIEVERTS_PER_YEAR = "µSv/a"
    MILLI_SIEVERTS_PER_HOUR = "mSv/h"


class RadiationSensor(SensorModel):
    metadata: SensorMetadata = Field(default_factory=SensorMetadata)
    dead_time: Optional[float] = None
    conversion_factor: Optional[float] = None
    unit: RadiationSensorUnit
    value: float


class RadiationSensors(SpaceApiModel):
    alpha: Optional[List[RadiationSensor]] = None
    beta: Optional[List[RadiationSensor]] = None
    gamma: Optional[List[RadiationSensor]] = None
    beta_gamma: Optional[List[RadiationSensor]] = None


class Sensors(SpaceApiModel):
    """
    All sensor readings of a space, grouped by kind.

    Sensor templates append to these lists, so unlike the other records a
    Sensors instance stays mutable.
    """

    model_config = ConfigDict(frozen=False)

    skip_empty_fields: ClassVar[FrozenSet[str]] = frozenset({
        "temperature",
        "door_locked",
        "barometer",
        "humidity",
        "beverage_supply",
        "power_consumption",
        "wind",
        "network_connections",
        "account_balance",
        "total_member_count",
        "people_now_present",
        "network_traffic",
    })

    temperature: List[TemperatureSensor] = Field(default_factory=list)
    door_locked: List[DoorLockedSensor] = Field(default_factory=list)
    barometer: List[BarometerSensor] = Field(default_factory=list)
    radiation: Optional[RadiationSensors] = None
    humidity: List[HumiditySensor] = Field(default_factory=list)
    beverage_supply: List[BeverageSupplySensor] = Field(default_factory=list)
    power_consumption: List[PowerConsumptionSensor] = Field(default_factory=list)
    wind: List[WindSensor] = Field(default_factory=list)
    network_connections: List[NetworkConnectionsSensor] = Field(default_factory=list)
    account_balance: List[AccountBalanceSensor] = Field(default_factory=list)
    total_member_count: List[TotalMemberCountSensor] = Field(default_factory=list)
    people_now_present: List[PeopleNowPresentSensor] = Field(default_factory=list)
    network_traffic: List[NetworkTrafficSensor] = Field(default_factory=list)
