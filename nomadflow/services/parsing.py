"""Boundary parsing of user-entered amounts.

The one place raw input (JSON numbers or free text such as "25.000.000 VND",
"$1,000.50", "1 200") is turned into a finite float. Anything that cannot be
read unambiguously yields None; the core never sees strings.

Separator rules:
    - Only one kind of separator present: repeated, or followed by exactly
      three digits -> grouping ("1,000", "25.000.000"); otherwise decimal.
    - Both present: whichever comes last is the decimal mark
      ("1,234.56", "1.234,56").
"""

from __future__ import annotations
import re
from typing import Any, Optional

from nomadflow.services.money import as_finite

_STRIP_RE = re.compile(r"[^0-9.,\-]")
_NUMBER_RE = re.compile(r"^(\d+(\.\d+)?|\.\d+)$")
_EXPONENT_RE = re.compile(r"\d\s*[eE]\s*[+-]?\d")


def _normalize_separators(text: str) -> str:
    has_dot = "." in text
    has_comma = "," in text
    if has_dot and has_comma:
        decimal_mark = "." if text.rfind(".") > text.rfind(",") else ","
        group_mark = "," if decimal_mark == "." else "."
        return text.replace(group_mark, "").replace(decimal_mark, ".")
    if not has_dot and not has_comma:
        return text
    mark = "." if has_dot else ","
    head, _, tail = text.rpartition(mark)
    if text.count(mark) > 1 or len(tail) == 3:
        return text.replace(mark, "")
    return head.replace(mark, "") + "." + tail


def parse_amount(raw: Any) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if not isinstance(raw, str):
        return as_finite(raw)
    text = raw.strip()
    if not text:
        return None
    if _EXPONENT_RE.search(text):
        return None
    cleaned = _STRIP_RE.sub("", text)
    negative = cleaned.startswith("-")
    digits = cleaned[1:] if negative else cleaned
    if "-" in digits or not any(ch.isdigit() for ch in digits):
        return None
    normalized = _normalize_separators(digits)
    if not _NUMBER_RE.match(normalized):
        return None
    value = as_finite(float(normalized))
    if value is None:
        return None
    return -value if negative else value
