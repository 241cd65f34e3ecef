from __future__ import annotations

import re
from typing import Any

DIMENSION_PATTERN = re.compile(r"[0-9]+(?:px|%)")


def is_valid_dimension(value: Any) -> bool:
    """True for strings like ``"1024px"`` or ``"80%"``."""
    if not isinstance(value, str):
        return False
    return DIMENSION_PATTERN.fullmatch(value) is not None
