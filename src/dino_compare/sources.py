"""Dinosaur data source.

The source document is a JSON object holding the records under ``"Dinos"``.
It may come from the copy bundled with the package, a local file, or an
HTTP(S) URL.  Documents are validated against the bundled schema before any
record is built; failures are raised as ``DataSourceError`` and never retried.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import httpx
import jsonschema

from dino_compare.contracts.load import DINO_DOCUMENT_SCHEMA, validate_instance
from dino_compare.errors import DataSourceError
from dino_compare.model.records import SourceRecord

logger = logging.getLogger(__name__)

DATA_KEY = "Dinos"
BUNDLED_DOCUMENT = Path(__file__).resolve().parent / "data" / "dino.json"
DEFAULT_TIMEOUT = 10.0


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch_url(url: str, timeout: float) -> Any:
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise DataSourceError(f"Unable to fetch dinosaur data from {url}: {exc}") from exc
    try:
        return response.json()
    except ValueError as exc:
        raise DataSourceError(f"Dinosaur data at {url} is not valid JSON: {exc}") from exc


def _read_file(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataSourceError(f"Unable to read dinosaur data from {path}: {exc}") from exc
    try:
        return json.loads(text)
    except ValueError as exc:
        raise DataSourceError(f"Dinosaur data in {path} is not valid JSON: {exc}") from exc


def load_document(
    source: Optional[str | Path] = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """Fetch and validate the source document.

    Parameters
    ----------
    source:
        ``None`` or ``""`` for the bundled document, otherwise a file path or
        an ``http(s)://`` URL.
    timeout:
        Seconds to wait on a remote fetch.

    Raises
    ------
    DataSourceError
        If the document cannot be read, parsed or fails the schema.
    """
    if not source:
        logger.info("Loading bundled dinosaur data")
        document = _read_file(BUNDLED_DOCUMENT)
    elif isinstance(source, str) and _is_url(source):
        logger.info("Fetching dinosaur data from %s", source)
        document = _fetch_url(source, timeout)
    else:
        logger.info("Loading dinosaur data from %s", source)
        document = _read_file(Path(source))

    try:
        validate_instance(document, DINO_DOCUMENT_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise DataSourceError(f"Dinosaur data failed validation: {exc.message}") from exc
    return document


def load_source_records(
    source: Optional[str | Path] = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[SourceRecord]:
    """Load the source document and return its records in document order."""
    document = load_document(source, timeout=timeout)
    records = [SourceRecord.from_dict(entry) for entry in document[DATA_KEY]]
    logger.debug("Loaded %d dinosaur records", len(records))
    return records
