"""Clinical guideline navigation: taxonomy, matching, and session state for the assistant."""

from importlib import metadata


def get_version() -> str:
    try:
        return metadata.version("cpgnav")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
