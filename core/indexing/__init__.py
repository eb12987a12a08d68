# Path: core/indexing/__init__.py
# Purpose: Package initializer for filesystem scanning utilities.
# Layer: core/indexing.
# Details: Exposes the directory scanner and the image extension classifier.

from .scanner import SUPPORTED_EXTENSIONS, ImageScanner, is_image

__all__ = ["ImageScanner", "SUPPORTED_EXTENSIONS", "is_image"]
