# Path: core/filtering/pipeline.py
# Purpose: Orchestrate extension, dimension, and score filtering into the final path list.
# Layer: core/filtering.
# Details: Each step returns a new list in enumeration order; any fatal error aborts before output.

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from tqdm import tqdm

from config.settings import AppSettings
from core.errors import ConfigError, MissingMetadataSource
from core.indexing.scanner import ImageScanner
from core.models.domain import Range, ScoreFilter
from .dimensions import DimensionProbe, matches_dims, probe_dimensions
from .metadata import MetadataStore, report_missing
from .scores import apply_score_filters


@dataclass(frozen=True)
class FilterOptions:
    """Fully resolved inputs for one filtering run."""

    root: Path
    metadata_path: Optional[Path] = None
    score_filters: Optional[Sequence[ScoreFilter]] = None
    width_range: Optional[Range] = None
    height_range: Optional[Range] = None

    @classmethod
    def resolve(
        cls,
        settings: AppSettings,
        root: Optional[Path] = None,
        metadata_path: Optional[Path] = None,
        score_filters: Optional[Sequence[ScoreFilter]] = None,
        width_range: Optional[Range] = None,
        height_range: Optional[Range] = None,
    ) -> "FilterOptions":
        """Merge per-run arguments over configured defaults; arguments take precedence."""

        resolved_root = root if root is not None else settings.root_images_dir
        if resolved_root is None:
            raise ConfigError("root directory must be specified")

        if score_filters is None:
            score_filters = settings.parsed_score_filters()
        if width_range is None and settings.width_range is not None:
            width_range = settings.width_range.to_range()
        if height_range is None and settings.height_range is not None:
            height_range = settings.height_range.to_range()

        return cls(
            root=resolved_root,
            metadata_path=metadata_path if metadata_path is not None else settings.metadata_path,
            score_filters=tuple(score_filters) if score_filters else None,
            width_range=width_range,
            height_range=height_range,
        )


class FilterPipeline:
    """Compute the images under a root that pass every configured filter."""

    def __init__(
        self,
        options: FilterOptions,
        probe: DimensionProbe = probe_dimensions,
        logger: Optional[logging.Logger] = None,
        show_progress: bool = False,
    ) -> None:
        self.options = options
        self.probe = probe
        self.logger = logger or logging.getLogger(__name__)
        self.show_progress = show_progress

    def run(self) -> List[Path]:
        """
        Execute every active step and return the surviving image paths.

        External calls:
        - core/indexing/scanner.py::ImageScanner.scan_images - enumerates candidates.
        - core/filtering/dimensions.py::matches_dims - probes sizes when a range is set.
        - core/filtering/metadata.py::MetadataStore.from_file - loads metadata for score filters.
        """

        options = self.options
        self.logger.info("metadata_path: %s", options.metadata_path)
        self.logger.info("score_filters: %s", _describe(options.score_filters))
        self.logger.info("width_range: %s", options.width_range)
        self.logger.info("height_range: %s", options.height_range)

        images = self.collect_candidates()

        if options.width_range is not None or options.height_range is not None:
            images = self.filter_dimensions(images)

        if options.score_filters:
            images = self.filter_scores(images)

        return images

    def collect_candidates(self) -> List[Path]:
        self.logger.info("scanning %s for images", self.options.root)
        images = ImageScanner(self.options.root).scan_images()
        self.logger.info("found %d candidate images", len(images))
        return images

    def filter_dimensions(self, images: List[Path]) -> List[Path]:
        self.logger.info("applying dimensions filter...")
        width_range, height_range = self.options.width_range, self.options.height_range
        kept = [
            image
            for image in tqdm(images, desc="Probing dimensions", unit="img", disable=not self.show_progress)
            if matches_dims(image, width_range, height_range, probe=self.probe)
        ]
        self.logger.info("%d of %d images match the dimension ranges", len(kept), len(images))
        return kept

    def filter_scores(self, images: List[Path]) -> List[Path]:
        if self.options.metadata_path is None:
            raise MissingMetadataSource()

        self.logger.info("applying image meta score filters...")
        store = MetadataStore.from_file(self.options.metadata_path)
        report_missing(images, store, self.logger)

        surviving = apply_score_filters(store, self.options.score_filters or (), self.logger)
        kept = [image for image in images if image in surviving]
        self.logger.info("%d of %d images pass the score filters", len(kept), len(images))
        return kept

    def list_directories(self) -> List[Path]:
        """Return every directory under the root, root included, in enumeration order."""

        self.logger.info("scanning %s for directories", self.options.root)
        return ImageScanner(self.options.root).scan_directories()


def _describe(filters: Optional[Sequence[ScoreFilter]]) -> str:
    if not filters:
        return "None"
    return ", ".join(str(score_filter) for score_filter in filters)
