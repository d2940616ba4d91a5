"""Query parameter parsing helpers."""

import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int_param(value: Optional[str], default: int) -> int:
    """
    Parse the leading integer of a query value, falling back to default.

    Mirrors how browsers and Node parse integers: "5", " 5", "5abc" and
    "5.9" all give 5. Missing values, values without leading digits and
    zero all yield the default.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if match is None:
        return default
    parsed = int(match.group(1))
    return parsed or default
