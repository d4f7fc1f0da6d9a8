import math
import re
from typing import Any, Optional

__all__ = ["parse_number", "round_half_up"]


def parse_number(value: Any) -> Optional[float]:
    """Return ``value`` as ``float`` if possible.

    Strings may contain optional units like ``"75 kg"`` or ``"180cm"``.
    A decimal comma is accepted.  Empty strings and anything that cannot be
    converted yield ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        m = re.search(r"[-+]?[0-9]+(?:[.,][0-9]+)?", value)
        if m:
            try:
                return float(m.group(0).replace(",", "."))
            except ValueError:
                return None
    return None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""
    return int(math.floor(value + 0.5))
