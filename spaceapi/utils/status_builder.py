"""
Staged construction of a ``Status``.

A builder is created for one schema version. Fields are set in any order,
``build()`` then checks the collected fields against the rules of that
version and returns the finished ``Status``. The checks run in a fixed
order and the first broken rule is reported.
"""

import logging
from typing import Any, List, Optional, Union

from spaceapi.models.extensions_model import Extensions
from spaceapi.models.sensor_model import Sensors
from spaceapi.models.status_model import (
    ApiVersion,
    Cache,
    Contact,
    Event,
    Feeds,
    IssueReportChannel,
    Link,
    Location,
    MembershipPlan,
    RadioShow,
    Spacefed,
    State,
    Status,
    StatusBuilderVersion,
    Stream,
)
from spaceapi.utils.errors import StatusBuilderError

logger = logging.getLogger(__name__)

API_V0_13 = "0.13"


class StatusBuilder:
    def __init__(self, space: str, version: StatusBuilderVersion = StatusBuilderVersion.V0_13):
        self.version = version
        self._space = space
        self._logo: Optional[str] = None
        self._url: Optional[str] = None
        self._location: Optional[Location] = None
        self._contact: Optional[Contact] = None
        self._spacefed: Optional[Spacefed] = None
        self._projects: List[str] = []
        self._cam: List[str] = []
        self._stream: Optional[Stream] = None
        self._feeds: Optional[Feeds] = None
        self._events: List[Event] = []
        self._radio_show: List[RadioShow] = []
        self._links: List[Link] = []
        self._membership_plans: List[MembershipPlan] = []
        self._cache: Optional[Cache] = None
        self._issue_report_channels: List[IssueReportChannel] = []
        self._state: Optional[State] = None
        self._sensors: Optional[Sensors] = None
        self._extensions = Extensions()

    @classmethod
    def v0_13(cls, space: str) -> "StatusBuilder":
        return cls(space, StatusBuilderVersion.V0_13)

    @classmethod
    def v14(cls, space: str) -> "StatusBuilder":
        return cls(space, StatusBuilderVersion.V14)

    @classmethod
    def mixed(cls, space: str) -> "StatusBuilder":
        """Write both ``api`` and ``api_compatibility``, checked against the v0.13 rules."""
        return cls(space, StatusBuilderVersion.MIXED)

    def logo(self, logo: str) -> "StatusBuilder":
        self._logo = logo
        return self

    def url(self, url: str) -> "StatusBuilder":
        self._url = url
        return self

    def location(self, location: Location) -> "StatusBuilder":
        self._location = location
        return self

    def contact(self, contact: Contact) -> "StatusBuilder":
        self._contact = contact
        return self

    def spacefed(self, spacefed: Spacefed) -> "StatusBuilder":
        self._spacefed = spacefed
        return self

    def add_project(self, project: str) -> "StatusBuilder":
        self._projects.append(project)
        return self

    def add_cam(self, cam: str) -> "StatusBuilder":
        self._cam.append(cam)
        return self

    def stream(self, stream: Stream) -> "StatusBuilder":
        self._stream = stream
        return self

    def feeds(self, feeds: Feeds) -> "StatusBuilder":
        self._feeds = feeds
        return self

    def add_event(self, event: Event) -> "StatusBuilder":
        self._events.append(event)
        return self

    def add_radio_show(self, radio_show: RadioShow) -> "StatusBuilder":
        self._radio_show.append(radio_show)
        return self

    def add_link(self, link: Link) -> "StatusBuilder":
        self._links.append(link)
        return self

    def add_membership_plan(self, membership_plan: MembershipPlan) -> "StatusBuilder":
        self._membership_plans.append(membership_plan)
        return self

    def cache(self, cache: Cache) -> "StatusBuilder":
        self._cache = cache
        return self

    def add_issue_report_channel(
        self, channel: Union[IssueReportChannel, str]
    ) -> "StatusBuilder":
        self._issue_report_channels.append(IssueReportChannel(channel))
        return self

    def state(self, state: State) -> "StatusBuilder":
        self._state = state
        return self

    def sensors(self, sensors: Sensors) -> "StatusBuilder":
        self._sensors = sensors
        return self

    def add_extension(self, name: str, value: Any) -> "StatusBuilder":
        self._extensions.set(name, value)
        return self

    def build(self) -> Status:
        try:
            status = self._build()
        except StatusBuilderError as e:
            logger.debug("Rejected %s status for %r: %s", self.version.name, self._space, e)
            raise
        logger.debug("Built %s status for %r", self.version.name, self._space)
        return status

    def _build(self) -> Status:
        version = self.version
        api = API_V0_13 if version != StatusBuilderVersion.V14 else None
        api_compatibility = (
            [ApiVersion.V14] if version != StatusBuilderVersion.V0_13 else None
        )

        contact = self._contact
        if contact is None:
            raise StatusBuilderError("contact missing")

        if self._spacefed is not None:
            self._spacefed.verify(version)

        if self._state is not None:
            self._state.verify(version)

        if version == StatusBuilderVersion.V14:
            if contact.jabber is not None:
                raise StatusBuilderError("jabber key under contact was renamed to xmpp")
            if contact.google is not None:
                raise StatusBuilderError("google key under contact was removed")
            if self._radio_show:
                raise StatusBuilderError("radio_show key was removed")
            if self._issue_report_channels:
                raise StatusBuilderError("issue_report_channels key was removed")
        else:
            if not self._issue_report_channels:
                raise StatusBuilderError("issue_report_channels must not be empty")
            if self._state is None:
                raise StatusBuilderError("state must be present in v0.13")
            if self._location is not None and self._location.timezone is not None:
                raise StatusBuilderError("location.timezone is only present in v0.14 and above")
            if self._links:
                raise StatusBuilderError("links is only present in v0.14 and above")
            if self._membership_plans:
                raise StatusBuilderError("membership_plans is only present in v0.14 and above")

        if self._logo is None:
            raise StatusBuilderError("logo missing")
        if self._url is None:
            raise StatusBuilderError("url missing")
        if self._location is None:
            raise StatusBuilderError("location missing")

        return Status(
            api=api,
            api_compatibility=api_compatibility,
            space=self._space,
            logo=self._logo,
            url=self._url,
            location=self._location,
            contact=contact,
            spacefed=self._spacefed,
            projects=list(self._projects) or None,
            cam=list(self._cam) or None,
            stream=self._stream,
            feeds=self._feeds,
            events=list(self._events) or None,
            radio_show=list(self._radio_show) or None,
            links=list(self._links),
            membership_plans=list(self._membership_plans),
            cache=self._cache,
            issue_report_channels=list(self._issue_report_channels),
            state=self._state,
            sensors=self._sensors.model_copy(deep=True) if self._sensors is not None else None,
            extensions=Extensions(self._extensions),
        )
