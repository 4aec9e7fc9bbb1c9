"""Exceptions raised while resolving update requests."""

from typing import List, Sequence


class UpdateServerError(Exception):
    """Base class for update server errors."""


class ConfigError(UpdateServerError):
    """Invalid startup configuration."""


class MalformedRequest(UpdateServerError):
    """An update request is missing one or more required parameters."""

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"Missing required parameter(s): {', '.join(self.missing)}")


class MalformedFilename(UpdateServerError):
    """A catalog filename does not follow the configured field layout."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Malformed filename {filename!r}: {reason}")


class AmbiguousCatalog(UpdateServerError):
    """More than one artifact matches an (image, device) pair."""

    def __init__(self, image: str, device: str, artifact_names: Sequence[str]):
        self.image = image
        self.device = device
        self.artifact_names: List[str] = list(artifact_names)
        super().__init__(
            f"More than one matching update image for image={image!r} device={device!r}: "
            f"{', '.join(self.artifact_names)}"
        )


class CatalogUnreachable(UpdateServerError):
    """The images directory could not be listed."""

    def __init__(self, directory: str, cause: OSError):
        self.directory = directory
        self.cause = cause
        super().__init__(f"Could not read images directory {directory!r}: {cause}")
