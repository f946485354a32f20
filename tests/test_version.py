from spaceapi.utils.version import get_version


def test_get_version():
    assert len(get_version().split(".")) == 3
