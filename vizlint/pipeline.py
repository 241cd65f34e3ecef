from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from vizlint.cleanup import cleanup
from vizlint.linter import LintReport, lint
from vizlint.resolver import ProgressCallback, load
from vizlint.rules import Rule
from vizlint.settings import VizlintSettings


async def lint_package(
    input_path: Path | str | None,
    rules: Optional[Sequence[Rule]] = None,
    *,
    settings: Optional[VizlintSettings] = None,
    on_progress: Optional[ProgressCallback] = None,
    keep_extracted: bool = False,
) -> LintReport:
    """Runs load, lint and (for archives) cleanup as one call."""
    package = await load(input_path, settings=settings, on_progress=on_progress)
    try:
        return await lint(package.base_path, rules)
    finally:
        if package.extracted and not keep_extracted:
            await cleanup(package.base_path)
