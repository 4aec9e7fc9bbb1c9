"""Data types used by the update resolution engine."""

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .errors import ConfigError, MalformedRequest

REQUEST_PARAMETERS = ("image", "device", "current_version")


@dataclass(frozen=True)
class Request:
    """Update request sent by a client."""
    image: str
    device: str
    current_version: str

    @classmethod
    def from_query(cls, query: Mapping[str, Optional[str]]) -> "Request":
        """
        Build a request from query string parameters.

        An empty value counts as present; only absent parameters are rejected.

        Raises:
            MalformedRequest: if any of the parameters is missing
        """
        missing = [name for name in REQUEST_PARAMETERS if query.get(name) is None]
        if missing:
            raise MalformedRequest(missing)
        return cls(
            image=query["image"],
            device=query["device"],
            current_version=query["current_version"],
        )


@dataclass(frozen=True)
class FilenameFieldLayout:
    """How the stem of an artifact filename decomposes into fields."""
    separator: str = "_"
    image_field_index: int = 0
    device_field_index: int = 1
    version_field_index: int = 2

    def __post_init__(self):
        if not self.separator:
            raise ConfigError("Filename fields separator must not be empty")
        for name in ("image_field_index", "device_field_index", "version_field_index"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass(frozen=True)
class Candidate:
    """A catalog entry decoded into its image, device and version fields."""
    image: str
    device: str
    version: str
    artifact_name: str


@dataclass(frozen=True)
class NoUpdateAvailable:
    """The client already runs the offered version, or nothing is offered."""


@dataclass(frozen=True)
class UpdateAvailable:
    """An artifact with a different version is available."""
    artifact_name: str


Outcome = Union[NoUpdateAvailable, UpdateAvailable]
