# Path: core/filtering/dimensions.py
# Purpose: Match images against optional inclusive width and height ranges.
# Layer: core/filtering.
# Details: Dimensions come from a Pillow header probe; unreadable files never match.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from PIL import Image

from core.models.domain import Dimensions, Range

logger = logging.getLogger(__name__)

DimensionProbe = Callable[[Path], Optional[Dimensions]]


def probe_dimensions(path: Path) -> Optional[Dimensions]:
    """Read an image's pixel size from its header, returning None if it cannot be opened."""

    try:
        with Image.open(path) as image:
            width, height = image.size
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        logger.debug("could not read dimensions of %s: %s", path, exc)
        return None
    return Dimensions(width=width, height=height)


def in_range(value: int, bounds: Optional[Range]) -> bool:
    if bounds is None:
        return True
    return bounds.contains(value)


def matches_dims(
    path: Path,
    width_range: Optional[Range],
    height_range: Optional[Range],
    probe: DimensionProbe = probe_dimensions,
) -> bool:
    """Return True when the image's probed size satisfies every supplied range."""

    if width_range is None and height_range is None:
        return True

    dims = probe(path)
    if dims is None:
        logger.debug("excluding %s: dimensions unavailable", path)
        return False

    return in_range(dims.width, width_range) and in_range(dims.height, height_range)
