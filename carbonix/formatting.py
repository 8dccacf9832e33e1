"""
formatting.py – Currency rendering and report export helpers.

Reports are written as a single JSON document:
    {
        "kind":         "emissions" | "sequestration",
        "generated_at": ISO-8601 UTC timestamp,
        "currency":     "INR",
        "result":       <result.to_dict()>
    }

The timestamp lives only in the report envelope; results themselves carry
no time-dependent values.  Parent directories are created as needed.
"""
from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from carbonix.constants import DEFAULT_CURRENCY

RUPEE_SIGN = "₹"


def _group_indian(digits: str) -> str:
    """Group an unsigned digit string as lakh/crore: 4520000 → 45,20,000."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: float) -> str:
    """
    Render *amount* as whole rupees with Indian digit grouping.

    Examples
    --------
    >>> format_inr(4520000)
    '₹45,20,000'
    >>> format_inr(-1500.5)
    '-₹1,501'
    """
    # halves round away from zero
    whole = int(math.floor(abs(amount) + 0.5))
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}{RUPEE_SIGN}{_group_indian(str(whole))}"


def build_report(kind: str, result: Any, currency: str = DEFAULT_CURRENCY) -> dict[str, Any]:
    """Wrap a result object (anything with ``to_dict()``) in a report envelope."""
    return {
        "kind": kind,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "currency": currency,
        "result": result.to_dict(),
    }


def write_report(path: Path, report: dict[str, Any], indent: int = 2) -> Path:
    """Serialise *report* to JSON at *path*, creating parents as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(report, fh, indent=indent, ensure_ascii=False, default=str)
    return path
