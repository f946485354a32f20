from spaceapi.models.status_model import Contact, IssueReportChannel, Location, State
from spaceapi.utils.codec import encode
from spaceapi.utils.status_builder import StatusBuilder


def build_status():
    return (
        StatusBuilder.v0_13("coredump")
        .logo("https://www.coredump.ch/logo.png")
        .url("https://www.coredump.ch/")
        .location(Location(lat=47.22936, lon=8.82949))
        .contact(
            Contact(
                irc="irc://freenode.net/#coredump",
                twitter="@coredump_ch",
                foursquare="525c20e5498e875d8231b1e5",
                email="danilo@coredump.ch",
            )
        )
        .state(State(open=None))
        .add_issue_report_channel(IssueReportChannel.EMAIL)
        .add_issue_report_channel(IssueReportChannel.TWITTER)
        .add_extension("ccc", "chaostreff")
        .build()
    )


if __name__ == "__main__":
    print(encode(build_status()))
