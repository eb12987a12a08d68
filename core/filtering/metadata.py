# Path: core/filtering/metadata.py
# Purpose: Load per-image metadata records and look them up by path.
# Layer: core/filtering.
# Details: Reads JSON or JSON Lines files into an in-memory store keyed by path; any parse failure is fatal.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Union

from pydantic import ValidationError

from core.errors import MetadataLoadError
from core.models.domain import ImageMeta

logger = logging.getLogger(__name__)

JSON_LINES_SUFFIXES = {".jsonl", ".ndjson"}


def load_metas(path: Path | str) -> List[ImageMeta]:
    """
    Parse a metadata file into records, one per distinct path.

    The file is either a JSON array of records, a JSON object holding the
    array under ``"images"``, or JSON Lines when the suffix is ``.jsonl`` or
    ``.ndjson``. When a path appears more than once the last record wins and
    takes the position of the first occurrence.
    """

    meta_path = Path(path)
    try:
        text = meta_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MetadataLoadError(meta_path, str(exc)) from exc

    try:
        if meta_path.suffix.lower() in JSON_LINES_SUFFIXES:
            raw_records = [json.loads(line) for line in text.splitlines() if line.strip()]
        else:
            raw_records = _unwrap_records(json.loads(text))
    except ValueError as exc:
        raise MetadataLoadError(meta_path, f"invalid JSON: {exc}") from exc
    except TypeError as exc:
        raise MetadataLoadError(meta_path, str(exc)) from exc

    records: Dict[Path, ImageMeta] = {}
    for position, raw in enumerate(raw_records):
        try:
            meta = ImageMeta.model_validate(raw)
        except ValidationError as exc:
            raise MetadataLoadError(meta_path, f"invalid record #{position}: {exc}") from exc
        if meta.path in records:
            logger.debug("duplicate metadata for %s, keeping record #%d", meta.path, position)
        records[meta.path] = meta

    logger.info("loaded %d metadata records from %s", len(records), meta_path)
    return list(records.values())


def _unwrap_records(payload: Any) -> List[Any]:
    if isinstance(payload, dict) and "images" in payload:
        payload = payload["images"]
    if not isinstance(payload, list):
        raise TypeError(f"expected a list of records, got {type(payload).__name__}")
    return payload


class MetadataStore:
    """Read-only collection of metadata records indexed by image path."""

    def __init__(self, records: Iterable[ImageMeta] = ()) -> None:
        self._records: Dict[Path, ImageMeta] = {}
        for record in records:
            self._records[record.path] = record

    @classmethod
    def from_file(cls, path: Path | str) -> "MetadataStore":
        return cls(load_metas(path))

    def get(self, path: Path) -> Optional[ImageMeta]:
        return self._records.get(path)

    def filter(self, predicate: Callable[[ImageMeta], bool]) -> "MetadataStore":
        """Return a new store holding only the records that satisfy ``predicate``."""

        return MetadataStore(record for record in self._records.values() if predicate(record))

    def __contains__(self, path: object) -> bool:
        return path in self._records

    def __iter__(self) -> Iterator[ImageMeta]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)


def find_meta(metas: Union[MetadataStore, Sequence[ImageMeta]], path: Path) -> Optional[ImageMeta]:
    """Return the first record whose path equals ``path``."""

    if isinstance(metas, MetadataStore):
        return metas.get(path)
    return next((meta for meta in metas if meta.path == path), None)


def report_missing(
    images: Iterable[Path],
    metas: Union[MetadataStore, Sequence[ImageMeta]],
    log: Optional[logging.Logger] = None,
) -> List[Path]:
    """Log which images lack metadata and return them in input order."""

    log = log or logger
    missing: List[Path] = []
    for image in images:
        meta = find_meta(metas, image)
        if meta is None:
            log.warning("image `%s` does not have metadata, it will be ignored when filtering", image)
            missing.append(image)
        else:
            log.debug("image `%s` has metadata: %r", image, meta)
    return missing
