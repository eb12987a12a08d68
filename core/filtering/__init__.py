# Path: core/filtering/__init__.py
# Purpose: Package initializer for the filter-and-match engine.
# Layer: core/filtering.
# Details: Exposes dimension, metadata, and score predicates plus the pipeline that sequences them.

from .dimensions import in_range, matches_dims, probe_dimensions
from .metadata import MetadataStore, find_meta, load_metas, report_missing
from .scores import apply_score_filters, evaluate
from .pipeline import FilterOptions, FilterPipeline

__all__ = [
    "FilterOptions",
    "FilterPipeline",
    "MetadataStore",
    "apply_score_filters",
    "evaluate",
    "find_meta",
    "in_range",
    "load_metas",
    "matches_dims",
    "probe_dimensions",
    "report_missing",
]
