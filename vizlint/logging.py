import json
import logging
import logging.handlers
from datetime import datetime, UTC
from pathlib import Path
from typing import Any, Dict, Optional

# Initialize system logger
_logger = logging.getLogger("vizlint")
_logger.setLevel(logging.INFO)
_logger.addHandler(logging.NullHandler())


def setup_logging(log_file: Path, level: int = logging.INFO) -> None:
    """Attaches a rotating file handler for structured event records."""
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    _logger.setLevel(level)

    if any(isinstance(h, logging.handlers.RotatingFileHandler) and h.baseFilename == str(log_file.resolve()) for h in _logger.handlers):
        return

    # Rotating handler: 10MB per file, keep 5 backups
    handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10*1024*1024, backupCount=5, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter('%(message)s'))
    _logger.addHandler(handler)


def _build_record(event: str, data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "timestamp": datetime.now(UTC).isoformat(),
        "event": str(event or "").strip(),
        "data": data,
    }


def log_event(event: str, data: Optional[Dict[str, Any]] = None, level: int = logging.INFO, **kwargs) -> Dict[str, Any]:
    """
    Emits one JSON record on the ``vizlint`` logger.

    Extra keyword arguments are merged into ``data`` so call sites can stay short:
    ``log_event("package_cleaned", path=str(path))``.
    """
    full_data = {**(data or {}), **kwargs}
    record = _build_record(event, full_data)
    _logger.log(level, json.dumps(record, ensure_ascii=False, default=str))
    return record


def log_error(event: str, error: BaseException, **kwargs) -> Dict[str, Any]:
    return log_event(
        event,
        {"error": str(error), "error_type": type(error).__name__},
        level=logging.ERROR,
        **kwargs,
    )
