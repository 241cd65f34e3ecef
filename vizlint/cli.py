from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from vizlint.exceptions import VizlintError
from vizlint.logging import setup_logging
from vizlint.pipeline import lint_package
from vizlint.settings import VizlintSettings, load_settings


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vizlint", description="Validate a visual package before publishing.")
    parser.add_argument("target", help="Package directory or zip archive path.")
    parser.add_argument("--verbose", action="store_true", help="Print progress notices to stderr.")
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON output.")
    parser.add_argument(
        "--keep-extracted",
        action="store_true",
        help="Leave the scratch directory of an extracted archive on disk.",
    )
    parser.add_argument("--config", default="", help="Path to a JSON settings file.")
    parser.add_argument("--log-file", default="", help="Append structured event records to this file.")
    return parser


def _render_human(result: Dict[str, Any]) -> str:
    if bool(result.get("ok")):
        return f"OK: {result.get('target')}"
    if "code" in result:
        return f"ERROR [{result.get('code')}]: {result.get('message')}"
    lines = [f"FAIL ({len(result.get('errors', []))} error(s))"]
    lines.extend(str(item) for item in result.get("errors", []))
    return "\n".join(lines)


def _configure(args: argparse.Namespace) -> VizlintSettings:
    settings = load_settings(Path(args.config) if str(args.config).strip() else None)
    log_file = str(args.log_file).strip() or settings.log_file
    if log_file:
        setup_logging(Path(log_file))
    return settings


async def _run(args: argparse.Namespace, settings: VizlintSettings) -> Dict[str, Any]:
    def on_progress(notice: str) -> None:
        print(notice, file=sys.stderr)

    report = await lint_package(
        args.target,
        settings=settings,
        on_progress=on_progress if args.verbose else None,
        keep_extracted=bool(args.keep_extracted),
    )
    return {
        "ok": report.ok,
        "target": str(args.target),
        "message": report.message,
        "errors": list(report.errors),
    }


def main(argv: List[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    try:
        # Settings and log handlers are set up before the event loop starts.
        settings = _configure(args)
        result = asyncio.run(_run(args, settings))
    except VizlintError as exc:
        result = {"ok": False, "target": str(args.target), "code": exc.code, "message": str(exc)}

    if bool(args.json):
        print(json.dumps(result, indent=2, ensure_ascii=False))
    elif "code" in result:
        print(_render_human(result), file=sys.stderr)
    else:
        print(_render_human(result))
    return 0 if bool(result.get("ok")) else 1


if __name__ == "__main__":
    raise SystemExit(main())
