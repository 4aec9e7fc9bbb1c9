"""Parsing of artifact filenames into candidate records."""

from typing import List, Tuple

from .errors import MalformedFilename
from .models import Candidate, FilenameFieldLayout


def split_filename(filename: str, separator: str) -> Tuple[List[str], str]:
    """
    Split a filename into the fields of its stem and its extension.

    The stem is everything before the last '.'. Joining the fields with the
    separator and appending '.' plus the extension gives back the filename.

    Args:
        filename: Raw filename from the images directory
        separator: Separator between the fields of the stem

    Returns:
        Tuple of (fields, extension)

    Raises:
        MalformedFilename: if the filename has no extension
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot:
        raise MalformedFilename(filename, "no file extension")
    return stem.split(separator), extension


def _field(fields: List[str], index: int, name: str, filename: str) -> str:
    if index >= len(fields):
        raise MalformedFilename(
            filename,
            f"{name} field index {index} out of range ({len(fields)} fields)"
        )
    return fields[index]


def parse_filename(filename: str, layout: FilenameFieldLayout) -> Candidate:
    """
    Decode a filename into a candidate according to the field layout.

    Args:
        filename: Raw filename from the images directory
        layout: Configured field layout

    Returns:
        Candidate with image, device and version taken from the stem

    Raises:
        MalformedFilename: if the name is not valid UTF-8, has no extension
            or a field is missing
    """
    try:
        filename.encode("utf-8")
    except UnicodeEncodeError:
        raise MalformedFilename(filename, "not valid UTF-8")

    fields, _ = split_filename(filename, layout.separator)
    return Candidate(
        image=_field(fields, layout.image_field_index, "image", filename),
        device=_field(fields, layout.device_field_index, "device", filename),
        version=_field(fields, layout.version_field_index, "version", filename),
        artifact_name=filename,
    )
