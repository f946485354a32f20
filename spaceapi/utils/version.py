from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Version of the installed spaceapi distribution, e.g. for API responses."""
    try:
        return version("spaceapi")
    except PackageNotFoundError:
        return "0.0.0"
