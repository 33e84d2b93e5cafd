from __future__ import annotations
import math
from typing import List, Mapping, Optional

from loguru import logger

from services.charts import RenderOptions


def parse_number(raw: Optional[str]) -> float:
    """Numeric query value; blank, missing or junk becomes 0."""
    s = (raw or "").strip()
    if not s:
        return 0.0
    try:
        return float(s)
    except ValueError:
        return 0.0


def parse_values(raw: Optional[str]) -> List[float]:
    out = []
    for item in (raw or "").split(","):
        item = item.strip()
        if not item:
            out.append(0.0)  # "1,,2" keeps the gap as a zero
            continue
        try:
            v = float(item)
        except ValueError:
            logger.debug("dropping value {!r}", item)
            continue
        if not math.isfinite(v):
            logger.debug("dropping non-finite value {!r}", item)
            continue
        out.append(v)
    return out


def parse_flag(raw: Optional[str]) -> bool:
    return raw == "1"


def options_from_query(params: Mapping[str, str]) -> RenderOptions:
    return RenderOptions(
        line=parse_flag(params.get("line")),
        fill=parse_flag(params.get("fill")),
        bar=parse_flag(params.get("bar")),
        gray=parse_flag(params.get("gray")),
        max_value=parse_number(params.get("maxValue")),
    )
