"""Update resolution: matching candidates and deciding on an outcome."""

import logging
from typing import Iterable, List, Sequence

from .catalog import list_catalog, parse_catalog
from .errors import AmbiguousCatalog
from .models import (
    Candidate,
    FilenameFieldLayout,
    NoUpdateAvailable,
    Outcome,
    Request,
    UpdateAvailable,
)

logger = logging.getLogger(__name__)


def match_candidates(candidates: Iterable[Candidate], request: Request) -> List[Candidate]:
    """Return the candidates for the request's image and device, in input order."""
    return [
        candidate for candidate in candidates
        if candidate.image == request.image and candidate.device == request.device
    ]


def decide(matches: Sequence[Candidate], request: Request) -> Outcome:
    """
    Decide whether the matching candidates offer an update.

    Versions are opaque: any difference to the current version is an update,
    there is no ordering.

    Args:
        matches: Candidates matching the request's image and device
        request: The update request

    Returns:
        UpdateAvailable for a single match with a different version,
        NoUpdateAvailable otherwise

    Raises:
        AmbiguousCatalog: if more than one candidate matches
    """
    if len(matches) > 1:
        raise AmbiguousCatalog(
            request.image,
            request.device,
            [candidate.artifact_name for candidate in matches],
        )

    if not matches or matches[0].version == request.current_version:
        return NoUpdateAvailable()

    return UpdateAvailable(matches[0].artifact_name)


def resolve_update(request: Request, images_directory: str, layout: FilenameFieldLayout) -> Outcome:
    """
    Resolve an update request against the current content of the images directory.

    The directory is listed exactly once; malformed filenames are skipped.

    Raises:
        CatalogUnreachable: if the images directory cannot be listed
        AmbiguousCatalog: if more than one artifact matches
    """
    candidates = parse_catalog(list_catalog(images_directory), layout)
    matches = match_candidates(candidates, request)

    try:
        outcome = decide(matches, request)
    except AmbiguousCatalog as e:
        logger.error(str(e))
        raise

    if isinstance(outcome, UpdateAvailable):
        logger.info(
            f"Update for image={request.image} device={request.device}: "
            f"{request.current_version} -> {outcome.artifact_name}"
        )
    else:
        logger.debug(
            f"No update for image={request.image} device={request.device} "
            f"current_version={request.current_version}"
        )
    return outcome
