"""Turn raw card input text into numbers before it reaches the store."""

from __future__ import annotations

import math
from typing import Optional, Union


def parse_numeric_input(raw: Union[str, int, float, None]) -> Optional[float]:
    """
    Parse what an input widget sent, e.g. "100,000" -> 100000.0.

    Returns None for text that is not a number; the edit should be dropped.
    An empty field counts as 0.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = raw.replace(",", "").strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return None

    if not math.isfinite(value):
        return None
    return value
