from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import aiofiles

from vizlint.exceptions import MetadataParseError, MetadataReadError
from vizlint.logging import log_event

METADATA_FILENAME = "metadata.json"


def metadata_path(base_path: Path | str) -> Path:
    return Path(base_path) / METADATA_FILENAME


async def load_metadata(base_path: Path | str) -> Any:
    """
    Reads and parses ``metadata.json`` beneath ``base_path``.

    The parsed value is returned as-is; schema checks belong to the rules.
    """
    path = metadata_path(base_path)
    try:
        async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
            text = await f.read()
    except UnicodeDecodeError as exc:
        raise MetadataParseError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise MetadataReadError(f"Could not read {path}: {exc}") from exc

    try:
        metadata = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MetadataParseError(f"{path} is not valid JSON: {exc}") from exc

    log_event("metadata_loaded", path=str(path))
    return metadata
