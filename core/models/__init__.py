# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes the value types used across scanning, filtering, and configuration layers.

from .domain import ComparisonOperator, Dimensions, ImageMeta, ImagePath, NodeType, Range, ScoreFilter

__all__ = ["ComparisonOperator", "Dimensions", "ImageMeta", "ImagePath", "NodeType", "Range", "ScoreFilter"]
