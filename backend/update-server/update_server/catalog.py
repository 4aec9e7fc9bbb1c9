"""Reading of the images directory."""

import logging
import os
from typing import Iterable, List

from .errors import CatalogUnreachable, MalformedFilename
from .filename import parse_filename
from .models import Candidate, FilenameFieldLayout

logger = logging.getLogger(__name__)


def list_catalog(images_directory: str) -> List[str]:
    """
    List the names of the regular files in the images directory.

    Sub-directories and other non-file entries are not part of the catalog.

    Args:
        images_directory: Path of the images directory

    Returns:
        Sorted list of filenames

    Raises:
        CatalogUnreachable: if the directory cannot be listed
    """
    try:
        with os.scandir(images_directory) as entries:
            names = [entry.name for entry in entries if entry.is_file()]
    except OSError as e:
        logger.error(f"Failed to list images directory {images_directory}: {e}")
        raise CatalogUnreachable(images_directory, e) from e

    return sorted(names)


def parse_catalog(filenames: Iterable[str], layout: FilenameFieldLayout) -> List[Candidate]:
    """
    Parse catalog filenames, skipping the ones that do not fit the layout.

    Args:
        filenames: Raw filenames
        layout: Configured field layout

    Returns:
        Candidates for all well-formed filenames, in input order
    """
    candidates = []
    for filename in filenames:
        try:
            candidates.append(parse_filename(filename, layout))
        except MalformedFilename as e:
            logger.warning(f"Skipping catalog entry: {e}")
    return candidates
