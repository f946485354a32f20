from enum import Enum
from pydantic import ConfigDict, Field, ValidationInfo, model_validator
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from spaceapi.models.base_model import SpaceApiModel, from_wire
from spaceapi.models.extensions_model import Extensions, FrozenExtensions
from spaceapi.models.sensor_model import Sensors
from spaceapi.utils.errors import StatusBuilderError


class StatusBuilderVersion(Enum):
    V0_13 = "0.13"
    V14 = "14"
    MIXED = "mixed"


class ApiVersion(str, Enum):
    V14 = "14"


class IssueReportChannel(str, Enum):
    EMAIL = "email"
    ISSUE_MAIL = "issue_mail"
    TWITTER = "twitter"
    ML = "ml"


class Location(SpaceApiModel):
    address: Optional[str] = None
    lat: float
    lon: float
    timezone: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "address": "Spinnereistrasse 2, 8640 Rapperswil, Switzerland",
                "lat": 47.22936,
                "lon": 8.82949,
                "timezone": "Europe/Zurich",
            }
        }
    )


class Spacefed(SpaceApiModel):
    spacenet: bool
    spacesaml: bool
    spacephone: Optional[bool] = None

    def verify(self, version: StatusBuilderVersion) -> None:
        if version == StatusBuilderVersion.V14:
            if self.spacephone is not None:
                raise StatusBuilderError("spacefed.spacephone key was removed")
        elif self.spacephone is None:
            raise StatusBuilderError("spacefed.spacephone must be present")


class Icon(SpaceApiModel):
    open: str
    closed: str


class State(SpaceApiModel):
    """
    Open state of the space. ``open`` is None when the state is unknown and
    is then written as ``null`` instead of being left out.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"open"})

    open: Optional[bool] = None
    lastchange: Optional[int] = None
    trigger_person: Optional[str] = None
    message: Optional[str] = None
    icon: Optional[Icon] = None

    def verify(self, version: StatusBuilderVersion) -> None:
        # No state key differs between the supported versions yet.
        pass


class Event(SpaceApiModel):
    name: str
    type_: str = Field(alias="type")
    timestamp: int
    extra: Optional[str] = None


class Keymaster(SpaceApiModel):
    name: Optional[str] = None
    irc_nick: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    twitter: Optional[str] = None
    xmpp: Optional[str] = None
    mastodon: Optional[str] = None
    matrix: Optional[str] = None


class GoogleContact(SpaceApiModel):
    plus: Optional[str] = None


class Contact(SpaceApiModel):
    skip_empty_fields: ClassVar[FrozenSet[str]] = frozenset({"keymasters"})

    phone: Optional[str] = None
    sip: Optional[str] = None
    keymasters: List[Keymaster] = Field(default_factory=list)
    irc: Optional[str] = None
    twitter: Optional[str] = None
    mastodon: Optional[str] = None
    facebook: Optional[str] = None
    google: Optional[GoogleContact] = None
    identica: Optional[str] = None
    foursquare: Optional[str] = None
    email: Optional[str] = None
    ml: Optional[str] = None
    xmpp: Optional[str] = None
    issue_mail: Optional[str] = None
    gopher: Optional[str] = None
    matrix: Optional[str] = None
    mumble: Optional[str] = None
    jabber: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "irc": "irc://freenode.net/#coredump",
                "twitter": "@coredump_ch",
                "email": "danilo@coredump.ch",
                "keymasters": [{"name": "Danilo", "irc_nick": "dbrgn"}],
            }
        }
    )


class Feed(SpaceApiModel):
    type_: Optional[str] = Field(default=None, alias="type")
    url: str


class Feeds(SpaceApiModel):
    blog: Optional[Feed] = None
    wiki: Optional[Feed] = None
    calendar: Optional[Feed] = None
    flickr: Optional[Feed] = None


class Cache(SpaceApiModel):
    schedule: str


class RadioShow(SpaceApiModel):
    name: str
    url: str
    type_: str = Field(alias="type")
    start: str
    end: str


class Stream(SpaceApiModel):
    m4: Optional[str] = None
    mjpeg: Optional[str] = None
    ustream: Optional[str] = None


class Link(SpaceApiModel):
    name: str
    description: Optional[str] = None
    url: str


class MembershipPlan(SpaceApiModel):
    name: str
    value: float
    currency: str
    billing_interval: str
    description: Optional[str] = None


class Status(SpaceApiModel):
    """
    The status document of a space.

    Creating a Status directly skips the version rules, use
    ``StatusBuilder`` for anything that has to be a valid document.
    Keys prefixed with ``ext_`` end up in ``extensions`` when decoding and
    are written back after all other keys. Python code may also pass a
    ready map of bare names as ``extensions``, a JSON document may not.
    """

    skip_empty_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"links", "membership_plans", "issue_report_channels", "extensions"}
    )

    api: Optional[str] = None
    api_compatibility: Optional[List[ApiVersion]] = None
    space: str
    logo: str
    url: str
    location: Location
    contact: Contact
    spacefed: Optional[Spacefed] = None
    projects: Optional[List[str]] = None
    cam: Optional[List[str]] = None
    stream: Optional[Stream] = None
    feeds: Optional[Feeds] = None
    events: Optional[List[Event]] = None
    radio_show: Optional[List[RadioShow]] = None
    links: List[Link] = Field(default_factory=list)
    membership_plans: List[MembershipPlan] = Field(default_factory=list)
    cache: Optional[Cache] = None
    issue_report_channels: List[IssueReportChannel] = Field(default_factory=list)
    state: Optional[State] = None
    sensors: Optional[Sensors] = None
    extensions: Extensions = Field(default_factory=FrozenExtensions)

    @model_validator(mode="before")
    @classmethod
    def _collect_extensions(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        wire = from_wire(info)
        known = set()
        for name, field in cls.model_fields.items():
            if name == "extensions":
                continue
            known.add(field.alias or name)
            if not wire:
                known.add(name)

        extensions = Extensions()
        collected = {}
        for key, value in data.items():
            if key in known:
                collected[key] = value
            elif key == "extensions" and not wire and isinstance(value, dict):
                extensions.update(value)
            else:
                extensions.decode(key, value)
        collected["extensions"] = extensions
        return collected

    def _encode_extra(self, data: Dict[str, Any]) -> Dict[str, Any]:
        extensions = data.pop("extensions", None) or {}
        data.update(Extensions(extensions).encode())
        return data
