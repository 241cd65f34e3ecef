from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

import aiofiles.os

from vizlint.exceptions import CleanupFailed, InvalidExtractedPath
from vizlint.logging import log_event
from vizlint.metadata import METADATA_FILENAME, metadata_path


async def cleanup(path: Path | str) -> Path:
    """
    Deletes an extracted package directory and returns its resolved path.

    Only call this on directories produced by ``vizlint.resolver.load``. The
    metadata.json check is the only guard against removing anything else.
    """
    target = Path(path).expanduser().resolve()
    if not await aiofiles.os.path.isfile(metadata_path(target)):
        raise InvalidExtractedPath(f"{target} has no {METADATA_FILENAME}; refusing to delete it")

    try:
        await asyncio.to_thread(shutil.rmtree, target)
    except OSError as exc:
        raise CleanupFailed(f"Could not remove {target}: {exc}") from exc

    log_event("package_cleaned", path=str(target))
    return target
