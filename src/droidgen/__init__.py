"""droidgen: Android Compose project scaffolding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("droidgen")
except PackageNotFoundError:
    __version__ = "0.0.0"
