"""
Shared fixtures for the spaceapi tests.
"""

import pytest

from spaceapi.models.status_model import Contact, IssueReportChannel, Location, State
from spaceapi.utils.status_builder import StatusBuilder


@pytest.fixture
def location():
    return Location(lat=0.0, lon=0.0)


@pytest.fixture
def contact():
    return Contact()


@pytest.fixture
def v0_13_builder(location, contact):
    """A v0.13 builder holding every field that version requires."""
    return (
        StatusBuilder.v0_13("foo")
        .logo("bar")
        .url("foobar")
        .location(location)
        .contact(contact)
        .state(State(open=False))
        .add_issue_report_channel(IssueReportChannel.EMAIL)
    )


@pytest.fixture
def v14_builder(location, contact):
    """A v14 builder holding every field that version requires."""
    return StatusBuilder.v14("foo").logo("bar").url("foobar").location(location).contact(contact)


@pytest.fixture
def mixed_builder(location, contact):
    return (
        StatusBuilder.mixed("foo")
        .logo("bar")
        .url("foobar")
        .location(location)
        .contact(contact)
        .state(State(open=True))
        .add_issue_report_channel(IssueReportChannel.EMAIL)
    )
