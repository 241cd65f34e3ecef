import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vizlint.exceptions import SettingsError

DEFAULT_TEMP_PREFIX = "vizlint-"


class VizlintSettings(BaseModel):
    """Knobs for where scratch directories go and where event logs are written."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    temp_root: Optional[Path] = None
    temp_prefix: str = Field(default=DEFAULT_TEMP_PREFIX, min_length=1)
    log_file: Optional[Path] = None


def _read_json(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        raise SettingsError(f"Settings file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SettingsError(f"Settings file is not valid JSON: {path}: {exc}") from exc
    except OSError as exc:
        raise SettingsError(f"Settings file could not be read: {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise SettingsError(f"Settings file must contain a JSON object: {path}")
    return payload


def load_settings(path: Optional[Path] = None) -> VizlintSettings:
    """Loads settings from a JSON file, or returns defaults when no path is given."""
    if path is None:
        return VizlintSettings()
    payload = _read_json(Path(path))
    try:
        return VizlintSettings.model_validate(payload)
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in {path}: {exc}") from exc
