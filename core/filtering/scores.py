# Path: core/filtering/scores.py
# Purpose: Evaluate score filter expressions against metadata records.
# Layer: core/filtering.
# Details: Filters narrow the metadata store one pass at a time; records without a usable score never pass.

from __future__ import annotations

import logging
from typing import Optional, Sequence

from core.models.domain import ImageMeta, ScoreFilter
from .metadata import MetadataStore

logger = logging.getLogger(__name__)


def evaluate(meta: ImageMeta, score_filter: ScoreFilter) -> bool:
    if meta.score is None:
        return False
    return score_filter.operator.compare(meta.score, score_filter.threshold)


def apply_score_filters(
    store: MetadataStore,
    filters: Sequence[ScoreFilter],
    log: Optional[logging.Logger] = None,
) -> MetadataStore:
    """Narrow ``store`` by each filter in turn, logging the surviving count after every pass."""

    log = log or logger
    for score_filter in filters:
        store = store.filter(lambda meta, f=score_filter: evaluate(meta, f))
        log.info("%d metadata records remain after `%s`", len(store), score_filter)
    return store
