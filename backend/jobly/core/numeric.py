"""Numeric Parsing — explicit parse-and-validate step for numeric query values.

Invariants:
    - parse_number never raises and never returns NaN or infinity
    - Result is either ok (value set) or failed (reason set), never both
    - Integral inputs come back as int, everything else as float
"""

import math
import re
from dataclasses import dataclass

_DECIMAL_LITERAL = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


@dataclass(frozen=True)
class ParsedNumber:
    """Outcome of parse_number: a finite number or the reason it failed."""
    value: int | float | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def _finite(number: int | float) -> ParsedNumber:
    if isinstance(number, float):
        if not math.isfinite(number):
            return ParsedNumber(reason="must be finite")
        if number.is_integer():
            return ParsedNumber(value=int(number))
    return ParsedNumber(value=number)


def parse_number(raw: object) -> ParsedNumber:
    """Parse an int, float or decimal string into a finite number."""
    if isinstance(raw, bool):
        return ParsedNumber(reason="booleans are not numbers")
    if isinstance(raw, (int, float)):
        return _finite(raw)
    if not isinstance(raw, str):
        return ParsedNumber(reason=f"unsupported type {type(raw).__name__}")

    text = raw.strip()
    if not text:
        return ParsedNumber(reason="empty value")
    if not _DECIMAL_LITERAL.match(text):
        return ParsedNumber(reason=f"'{raw}' is not a decimal number")
    try:
        if text.lstrip("+-").isdigit():
            return ParsedNumber(value=int(text))
        return _finite(float(text))
    except ValueError:
        # int() refuses literals past sys.get_int_max_str_digits()
        return ParsedNumber(reason=f"too many digits ({len(text)})")
