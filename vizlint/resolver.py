"""
Package Resolver

Turns a user supplied path into a directory holding ``metadata.json``.
Directories are used in place; any other file is treated as a zip archive and
unpacked into a fresh scratch directory that the caller owns afterwards.
"""
from __future__ import annotations

import asyncio
import shutil
import tempfile
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Callable, Optional

import aiofiles.os

from vizlint.exceptions import (
    ExtractionFailed,
    MissingMetadata,
    PackageNotFound,
    PathNotSupplied,
)
from vizlint.logging import log_error, log_event
from vizlint.metadata import METADATA_FILENAME, metadata_path
from vizlint.settings import VizlintSettings

PROGRESS_EXTRACTION_STARTED = "extraction started"
PROGRESS_EXTRACTION_FINISHED = "extraction finished"

ProgressCallback = Callable[[str], None]


@dataclass(frozen=True)
class ResolvedPackage:
    base_path: Path
    source_path: Path
    extracted: bool = False


def _notify(on_progress: Optional[ProgressCallback], notice: str, **data) -> None:
    log_event(notice.replace(" ", "_"), data)
    if on_progress is None:
        return
    try:
        on_progress(notice)
    except (RuntimeError, ValueError, TypeError, OSError) as exc:
        log_error("progress_callback_failed", exc, notice=notice)


def _is_safe_archive_name(name: str) -> bool:
    normalized = str(name or "").replace("\\", "/")
    if not normalized or normalized.startswith("/"):
        return False
    pure = PurePosixPath(normalized)
    if pure.is_absolute() or ".." in pure.parts:
        return False
    # Drive letters ("C:/...") survive PurePosixPath untouched.
    if ":" in pure.parts[0]:
        return False
    return True


def _extract_archive(archive_path: Path, settings: VizlintSettings) -> Path:
    try:
        archive = zipfile.ZipFile(archive_path, "r")
    except (zipfile.BadZipFile, OSError) as exc:
        raise ExtractionFailed(f"Could not open archive {archive_path}: {exc}") from exc

    with archive:
        unsafe = [name for name in archive.namelist() if not _is_safe_archive_name(name)]
        if unsafe:
            raise ExtractionFailed(f"Archive {archive_path} has entries outside its root: {unsafe[0]}")

        try:
            destination = Path(
                tempfile.mkdtemp(
                    prefix=settings.temp_prefix,
                    dir=str(settings.temp_root) if settings.temp_root else None,
                )
            )
        except OSError as exc:
            raise ExtractionFailed(f"Could not create a temporary directory: {exc}") from exc

        try:
            archive.extractall(destination)
        except (zipfile.BadZipFile, zlib.error, EOFError, OSError, RuntimeError, ValueError) as exc:
            shutil.rmtree(destination, ignore_errors=True)
            raise ExtractionFailed(f"Could not extract archive {archive_path}: {exc}") from exc

    return destination.resolve()


async def _require_metadata(directory: Path) -> Path:
    if not await aiofiles.os.path.isfile(metadata_path(directory)):
        raise MissingMetadata(f"No {METADATA_FILENAME} found in {directory}")
    return directory


async def load(
    input_path: Path | str | None,
    *,
    settings: Optional[VizlintSettings] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> ResolvedPackage:
    """
    Resolves ``input_path`` to a package directory.

    Returns a ``ResolvedPackage``; when ``extracted`` is set the caller is
    responsible for passing ``base_path`` to ``vizlint.cleanup.cleanup``.
    """
    if input_path is None or not str(input_path).strip():
        raise PathNotSupplied("A package path must be supplied")
    settings = settings or VizlintSettings()

    source = Path(input_path).expanduser().resolve()
    if not await aiofiles.os.path.exists(source):
        raise PackageNotFound(f"Package not found: {source}")

    if await aiofiles.os.path.isdir(source):
        base_path = await _require_metadata(source)
        log_event("package_resolved", source=str(source), base_path=str(base_path), extracted=False)
        return ResolvedPackage(base_path=base_path, source_path=source, extracted=False)

    _notify(on_progress, PROGRESS_EXTRACTION_STARTED, archive=str(source))
    destination = await asyncio.to_thread(_extract_archive, source, settings)
    _notify(on_progress, PROGRESS_EXTRACTION_FINISHED, archive=str(source), destination=str(destination))

    try:
        base_path = await _require_metadata(destination)
    except MissingMetadata:
        # Scratch directories are only handed out on success.
        await asyncio.to_thread(shutil.rmtree, destination, True)
        raise

    log_event("package_resolved", source=str(source), base_path=str(base_path), extracted=True)
    return ResolvedPackage(base_path=base_path, source_path=source, extracted=True)


async def resolve(
    input_path: Path | str | None,
    *,
    settings: Optional[VizlintSettings] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> Path:
    """Like ``load`` but returns only the base directory."""
    package = await load(input_path, settings=settings, on_progress=on_progress)
    return package.base_path
